#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/_testutils.py

from functools import partial

from hypothesis import strategies as st

st_integers_rgb_val = partial(st.integers, 0, 255)
st_tuples_integers_rgb = partial(st.tuples, st_integers_rgb_val(), st_integers_rgb_val(), st_integers_rgb_val())

st_hex_color = partial(st.text, alphabet="0123456789ABCDEF", min_size=6, max_size=6)

st_hue = partial(st.floats, 0.0, 360.0, exclude_max=True, allow_nan=False)
st_fraction = partial(st.floats, 0.0, 1.0, allow_nan=False)


def is_valid_channel_triple(rgb) -> bool:
    return (
        isinstance(rgb, tuple)
        and len(rgb) == 3
        and all(isinstance(v, int) and 0 <= v <= 255 for v in rgb)
    )
