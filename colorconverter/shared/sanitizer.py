#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/shared/sanitizer.py

import argparse
import re

from colorconverter.core import config as c
from .formatting import OutputKind

# Case-sensitive, exact token match
_OUTPUT_RE = re.compile("|".join(c.OUTPUT_CHOICES))


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_output_kind(v: str) -> OutputKind:
    """Validator for the output selector; only HEX, RGB or HSL pass."""
    if v is None or not _OUTPUT_RE.fullmatch(v):
        raise argparse.ArgumentTypeError(
            "output must be one of " + ", ".join(f"'{o}'" for o in c.OUTPUT_CHOICES)
            + f", got '{_sanitize_for_log(v)}'"
        )
    return OutputKind[v]


def handle_field(v: str) -> str:
    """
    Validator for raw color fields. Parsing is left to the converter so
    that it can report which field was wrong; this only refuses blanks.
    """
    if v is None or not str(v).strip():
        raise argparse.ArgumentTypeError("empty value")
    return str(v)


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "output": handle_output_kind,
    "hex": handle_field,
    "channel": handle_field,
    "hsl_component": handle_field,
}
