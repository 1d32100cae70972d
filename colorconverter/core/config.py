#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/config.py

# ==========================================
# Color Model Constants
# ==========================================

RGB_MAX = 255.0                    # 8-bit color depth limit
CHANNEL_MIN = 0                    # Lowest valid channel value
CHANNEL_MAX = 255                  # Highest valid channel value
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HUE_THIRD = 1.0 / 3.0              # Hue rotation between neighbouring channels
TWO_THIRDS = 2.0 / 3.0             # Upper edge of the descending ramp
UNIT = 1.0                         # Normalized maximum
HALF = 0.5                         # Luminance midpoint
DIV_2 = 2.0                        # Standard divisor for averages
PERCENT_MAX = 100.0                # Saturation and luminance arrive as percentages

# Hue sector offsets, indexed by the channel holding the maximum
HUE_OFFSETS = (0.0, 2.0, 4.0)

# ==========================================
# Input Constraints
# ==========================================

HEX_COLOR_LENGTH = 6               # RRGGBB without the leading '#'
HEX_CHANNEL_WIDTH = 2              # Digits per channel
INT16_MIN = -32768                 # RGB fields are parsed as signed 16-bit integers
INT16_MAX = 32767

OUTPUT_CHOICES = ("HEX", "RGB", "HSL")

# ==========================================
# User Configuration
# ==========================================

CONFIG_FILENAME = "colorconverter.yaml"
CONFIG_ENV_XDG = "XDG_CONFIG_HOME"
CONFIG_ENV_APPDATA = "APPDATA"

# ==========================================
# CLI UI
# ==========================================

RESULT_PREFIX = " ==>  "
NO_COLOR_ENV = "NO_COLOR"           # Any value disables ANSI styling in log output

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
