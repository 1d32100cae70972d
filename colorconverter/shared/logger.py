#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/shared/logger.py

import argparse
import os
import sys
from typing import NoReturn

from colorconverter.core import config as c


def _use_color() -> bool:
    return c.NO_COLOR_ENV not in os.environ


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    if not _use_color():
        print(f"[{level}] {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def fail(message: str, code: int = 2) -> NoReturn:
    """Log an error and terminate; nothing else is printed for this run."""
    log("error", message)
    sys.exit(code)


class ColorConverterArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report usage errors through the color-coded logger, exit status 2."""
        fail(message)
