# CanonFrac - Exceptions
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""Exception hierarchy for CanonFrac."""

from __future__ import annotations
from typing import Optional


# Operations that can attempt to form x/0
ZERO_DIVISION_OPERATIONS = {
    'construct': 'a fraction requires a nonzero denominator',
    'divide': 'a/b requires b != 0',
    'invert': '1/x requires x != 0',
}


class CanonFracError(Exception):
    """Base class for all CanonFrac exceptions."""
    pass


class DivisionByZero(CanonFracError, ZeroDivisionError):
    """
    Raised when an operation would form x/0.

    Construction with a zero denominator, division by a zero fraction and
    inversion of zero all raise this error. It is also a ZeroDivisionError,
    so callers written against the built-in numeric types keep working.
    """

    def __init__(self, operation: Optional[str] = None):
        message = "Divide by zero error."
        if operation in ZERO_DIVISION_OPERATIONS:
            message += f" ({ZERO_DIVISION_OPERATIONS[operation]})"
        super().__init__(message)
        self.operation = operation


class FractionOverflowError(CanonFracError, OverflowError):
    """Raised when a result does not fit the configured integer width."""

    def __init__(self, value: int, bits: int):
        super().__init__(
            f"Value {value} does not fit a signed {bits}-bit integer"
        )
        self.value = value
        self.bits = bits


class ConfigError(CanonFracError, ValueError):
    """Raised when a configuration value is invalid."""
    pass
