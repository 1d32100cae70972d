#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/channel.py

import string
from typing import Tuple

from . import config as c
from .errors import InvalidHexDigit

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_hex_channel(value: str) -> int:
    """
    Interpret a two-character hex pair (e.g. 'FF') as a channel value.

    Only the characters 0-9, a-f and A-F are accepted; signs, blanks and
    underscores that int() would otherwise tolerate raise InvalidHexDigit.
    The length is not checked here.
    """
    if not value or any(ch not in _HEX_DIGITS for ch in value):
        raise InvalidHexDigit(value)
    return int(value, 16)


def encode_hex_channel(value: int) -> str:
    """Uppercase hex, always padded to two digits."""
    return f"{int(value):0{c.HEX_CHANNEL_WIDTH}X}"


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Split a 6-digit hex color into its three channel values."""
    w = c.HEX_CHANNEL_WIDTH
    return tuple(decode_hex_channel(hex_code[i : i + w]) for i in (0, w, 2 * w))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "".join(encode_hex_channel(v) for v in (r, g, b))
