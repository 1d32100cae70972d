#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/main.py

import argparse
import sys
from typing import List, Optional

from colorconverter import __version__
from colorconverter.core import config as c
from colorconverter.core.user_config import UserConfig
from colorconverter.logic.convert import engine
from colorconverter.shared.logger import ColorConverterArgumentParser
from colorconverter.shared.sanitizer import INPUT_HANDLERS

INPUT_GROUPS = {
    "hex": ("hex",),
    "rgb": ("red", "green", "blue"),
    "hsl": ("hue", "saturation", "luminance"),
}


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for the converter."""
    parser = ColorConverterArgumentParser(
        prog="colorconverter",
        description="colorconverter: convert color values easily",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    # -h is taken by --hue
    parser.add_argument(
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"colorconverter {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="path of the config file (default: colorconverter.yaml\n"
        "in the user config directory)",
    )

    hex_group = parser.add_argument_group("hex input")
    hex_group.add_argument(
        "-x",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        metavar="HEX",
        help="the color in a 6 digit hex value",
    )

    rgb_group = parser.add_argument_group("rgb input (all three required)")
    rgb_group.add_argument(
        "-r",
        "--red",
        type=INPUT_HANDLERS["channel"],
        metavar="RED",
        help="the red value in an rgb color",
    )
    rgb_group.add_argument(
        "-g",
        "--green",
        type=INPUT_HANDLERS["channel"],
        metavar="GREEN",
        help="the green value in an rgb color",
    )
    rgb_group.add_argument(
        "-b",
        "--blue",
        type=INPUT_HANDLERS["channel"],
        metavar="BLUE",
        help="the blue value in an rgb color",
    )

    hsl_group = parser.add_argument_group("hsl input (all three required)")
    hsl_group.add_argument(
        "-h",
        "--hue",
        type=INPUT_HANDLERS["hsl_component"],
        metavar="HUE",
        help="the hue value in an hsl color (degrees)",
    )
    hsl_group.add_argument(
        "-s",
        "--saturation",
        type=INPUT_HANDLERS["hsl_component"],
        metavar="SATURATION",
        help="the saturation value in an hsl color (0 to 100)",
    )
    hsl_group.add_argument(
        "-l",
        "--luminance",
        type=INPUT_HANDLERS["hsl_component"],
        metavar="LUMINANCE",
        help="the luminance value in an hsl color (0 to 100)",
    )

    parser.add_argument(
        "-o",
        "--output",
        required=True,
        type=INPUT_HANDLERS["output"],
        metavar="OUTPUT",
        help="the output format, must be one of "
        + ", ".join(f"'{o}'" for o in c.OUTPUT_CHOICES),
    )
    return parser


def validate_input_groups(parser: argparse.ArgumentParser, args: argparse.Namespace) -> str:
    """Require exactly one complete input group and return its name."""
    supplied = []
    for name, fields in INPUT_GROUPS.items():
        given = [f for f in fields if getattr(args, f) is not None]
        if not given:
            continue
        missing = [f for f in fields if f not in given]
        if missing:
            parser.error(
                f"--{given[0]} requires "
                + ", ".join(f"--{m}" for m in missing)
            )
        supplied.append(name)

    if not supplied:
        parser.error("one of --hex, --red/--green/--blue or --hue/--saturation/--luminance is required")
    if len(supplied) > 1:
        parser.error(f"only one input group may be given, got: {', '.join(supplied)}")
    return supplied[0]


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for colorconverter CLI"""
    parser = get_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    validate_input_groups(parser, args)
    engine.run(args, UserConfig(args.config))


if __name__ == "__main__":
    main()
