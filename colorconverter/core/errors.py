#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/core/errors.py


class ConversionError(Exception):
    """Base class for every failure a single conversion can report."""


class InvalidHexDigit(ConversionError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"not a valid hex value: '{value}'")


class InvalidHexLength(ConversionError):
    def __init__(self, value: str, expected: int):
        self.value = value
        self.expected = expected
        super().__init__(
            f"hex color must have exactly {expected} digits, got '{value}'"
        )


class InvalidNumber(ConversionError, ValueError):
    """A numeric field could not be parsed. The message names the field."""

    def __init__(self, field: str, value, reason: str = "not a valid number"):
        self.field = field
        self.value = value
        super().__init__(f"{field} value {reason}: '{value}'")


class ValueOutOfRange(InvalidNumber):
    def __init__(self, field: str, value, low, high):
        self.low = low
        self.high = high
        super().__init__(field, value, reason=f"outside {low}..{high}")


class DegenerateHueComputation(ConversionError):
    def __init__(self, rgb):
        self.rgb = tuple(rgb)
        super().__init__(f"could not determine a hue for rgb{self.rgb}")


class UnreachableInputState(RuntimeError):
    """
    Raised when the dispatcher receives no complete input group.

    The CLI refuses such argument sets before dispatching, so this signals
    a programming error rather than bad user input.
    """


class ConfigError(Exception):
    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"config file {path}: {reason}")
