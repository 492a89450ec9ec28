# CanonFrac
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""
CanonFrac - Exact Rational Numbers in Canonical Form.

This package provides an immutable Fraction type that is always stored
reduced, with the sign on the numerator, plus helpers to move fractions to
and from the standard library and numpy.

Example:
    >>> import canonfrac as cf
    >>> half = cf.Fraction(2, 4)
    >>> print(half)
    1/2
    >>> print(half + cf.Fraction(1, 4))
    3/4
    >>> float(cf.Fraction(1, 4))
    0.25

Key Features:
    - Canonical form enforced on every construction
    - Pure arithmetic: operators return new values
    - A single DivisionByZero error for every attempt to form x/0
    - Configurable float precision and optional fixed integer width
"""

__version__ = "0.1.0"

# Core type
from .fraction import Fraction

# Integer helpers
from .arith import gcd, lcm, canonicalize

# Conversions
from .rational import to_fraction, to_stdlib, approximate

# Configuration
from .config import Config, Precision, get_config, set_config, using

# Exceptions
from .exceptions import (
    CanonFracError,
    DivisionByZero,
    FractionOverflowError,
    ConfigError,
)

__all__ = [
    # Version
    "__version__",
    # Core type
    "Fraction",
    # Integer helpers
    "gcd",
    "lcm",
    "canonicalize",
    # Conversions
    "to_fraction",
    "to_stdlib",
    "approximate",
    # Configuration
    "Config",
    "Precision",
    "get_config",
    "set_config",
    "using",
    # Exceptions
    "CanonFracError",
    "DivisionByZero",
    "FractionOverflowError",
    "ConfigError",
]
