#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/logic/convert/engine.py

import argparse

from colorconverter.core.errors import ConfigError, ConversionError
from colorconverter.core.user_config import UserConfig
from colorconverter.shared.formatting import OutputKind, format_color
from colorconverter.shared.logger import fail
from .resolver import resolve_rgb
from .renderer import render_convert_info

INPUT_FIELDS = ("hex", "red", "green", "blue", "hue", "saturation", "luminance")


def convert(output: OutputKind, **fields) -> str:
    """Resolve the supplied input fields and format them as ``output``."""
    return format_color(resolve_rgb(**fields), output)


def run(args: argparse.Namespace, user_config: UserConfig) -> None:
    """Main execution engine for color conversion"""
    try:
        user_config.load()
    except ConfigError as e:
        fail(str(e))

    fields = {name: getattr(args, name, None) for name in INPUT_FIELDS}
    try:
        out = render_convert_info(convert(args.output, **fields), args.output)
    except ConversionError as e:
        fail(str(e))

    print(out)
