#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/conversions.py

import math
from typing import Tuple

from . import config as c
from .errors import DegenerateHueComputation


def round_half_up(v: float) -> int:
    """Round to the nearest integer, halves away from zero (127.5 -> 128)."""
    return int(math.copysign(math.floor(abs(v) + c.HALF), v))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert RGB channels to HSL.

    Returns hue in degrees [0, 360) and saturation/luminance as fractions.
    The hue sector is picked from the index of the largest channel, so no
    float equality test against the maximum is needed.
    """
    fractions = (r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX)
    r_f, g_f, b_f = fractions
    cmax = max(fractions)
    cmin = min(fractions)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2

    if delta == 0:
        return (0.0, 0.0, L)

    if L < c.HALF:
        s = delta / (cmax + cmin)
    else:
        s = delta / (c.DIV_2 - cmax - cmin)

    idx = fractions.index(cmax)
    if idx == 0:
        sector = (g_f - b_f) / delta
    elif idx == 1:
        sector = (b_f - r_f) / delta
    elif idx == 2:
        sector = (r_f - g_f) / delta
    else:
        raise DegenerateHueComputation((r, g, b))

    h = c.HUE_SECTOR * (c.HUE_OFFSETS[idx] + sector)
    if not math.isfinite(h):
        raise DegenerateHueComputation((r, g, b))
    if h < 0:
        h += c.HUE_MAX
    return (h, s, L)


def _recover_channel(f: float, t1: float, t2: float) -> int:
    # Truncation toward zero, unlike the rounding used for grays and percentages
    if 6.0 * f < c.UNIT:
        v = t2 + (t1 - t2) * 6.0 * f
    elif c.DIV_2 * f < c.UNIT:
        v = t1
    elif 3.0 * f < c.DIV_2:
        v = t2 + (t1 - t2) * (c.TWO_THIRDS - f) * 6.0
    else:
        v = t2
    return int(v * c.RGB_MAX)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL (hue in degrees, saturation/luminance as fractions) to RGB."""
    h = h % c.HUE_MAX
    if s == 0:
        gray = round_half_up(c.RGB_MAX * L)
        return (gray, gray, gray)

    if L < c.HALF:
        t1 = L * (c.UNIT + s)
    else:
        t1 = s + L - s * L
    t2 = c.DIV_2 * L - t1

    hue_grad = h / c.HUE_MAX

    red_frac = hue_grad + c.HUE_THIRD
    if red_frac > c.UNIT:
        red_frac -= c.UNIT
    green_frac = hue_grad
    blue_frac = hue_grad - c.HUE_THIRD
    if blue_frac < 0:
        blue_frac += c.UNIT

    return (
        _recover_channel(red_frac, t1, t2),
        _recover_channel(green_frac, t1, t2),
        _recover_channel(blue_frac, t1, t2),
    )
