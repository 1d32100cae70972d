#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/logic/convert/resolver.py

import math
import re
from typing import Optional, Tuple

from colorconverter.core import config as c
from colorconverter.core import conversions as conv
from colorconverter.core.channel import hex_to_rgb
from colorconverter.core.errors import (
    InvalidHexLength,
    InvalidNumber,
    UnreachableInputState,
    ValueOutOfRange,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _parse_channel(field: str, value: str) -> int:
    """Parse an RGB field as a signed 16-bit integer, then require 0..255."""
    text = str(value)
    if not _INT_RE.fullmatch(text):
        raise InvalidNumber(field, value)
    try:
        val = int(text)
    except ValueError:
        # over the interpreter's digit limit
        raise InvalidNumber(field, value) from None
    if not c.INT16_MIN <= val <= c.INT16_MAX:
        raise InvalidNumber(field, value)
    if not c.CHANNEL_MIN <= val <= c.CHANNEL_MAX:
        raise ValueOutOfRange(field, value, c.CHANNEL_MIN, c.CHANNEL_MAX)
    return val


def _parse_float(field: str, value: str) -> float:
    """Plain decimal or exponent notation only; no blanks or underscores."""
    text = str(value)
    if not _FLOAT_RE.fullmatch(text):
        raise InvalidNumber(field, value)
    val = float(text)
    if not math.isfinite(val):
        raise InvalidNumber(field, value)
    return val


def _parse_percent(field: str, value: str) -> float:
    val = _parse_float(field, value)
    if not 0 <= val <= c.PERCENT_MAX:
        raise ValueOutOfRange(field, value, 0, int(c.PERCENT_MAX))
    return val / c.PERCENT_MAX


def from_hex(value: str) -> Tuple[int, int, int]:
    h = value[1:] if value.startswith("#") else value
    if len(h) != c.HEX_COLOR_LENGTH:
        raise InvalidHexLength(value, c.HEX_COLOR_LENGTH)
    return hex_to_rgb(h)


def from_rgb(red: str, green: str, blue: str) -> Tuple[int, int, int]:
    return (
        _parse_channel("red", red),
        _parse_channel("green", green),
        _parse_channel("blue", blue),
    )


def from_hsl(hue: str, saturation: str, luminance: str) -> Tuple[int, int, int]:
    h = _parse_float("hue", hue)
    s = _parse_percent("saturation", saturation)
    L = _parse_percent("luminance", luminance)
    return conv.hsl_to_rgb(h, s, L)


def resolve_rgb(
    hex: Optional[str] = None,
    red: Optional[str] = None,
    green: Optional[str] = None,
    blue: Optional[str] = None,
    hue: Optional[str] = None,
    saturation: Optional[str] = None,
    luminance: Optional[str] = None,
) -> Tuple[int, int, int]:
    """
    Resolve whichever input group was supplied into the canonical RGB triple.

    Groups are tried in the order hex, rgb, hsl. The CLI guarantees exactly
    one complete group, so anything else raises UnreachableInputState.
    """
    if hex is not None:
        return from_hex(hex)
    if None not in (red, green, blue):
        return from_rgb(red, green, blue)
    if None not in (hue, saturation, luminance):
        return from_hsl(hue, saturation, luminance)
    raise UnreachableInputState("no complete hex, rgb or hsl input group was supplied")
