#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/logic/convert/renderer.py

from colorconverter.core import config as c
from colorconverter.shared.formatting import OutputKind


def render_convert_info(formatted: str, kind: OutputKind) -> str:
    """Composes the two-line result printed for one conversion."""
    return f"Converted to {kind.description} your value is:\n{c.RESULT_PREFIX}{formatted}"
