# CanonFrac - Conversions
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""
Conversions between CanonFrac fractions and other numeric types.

The standard library already has `fractions.Fraction`; these helpers move
values across that boundary exactly, and approximate batches of fractions
as numpy arrays.

Example:
    >>> import fractions
    >>> from canonfrac.rational import to_fraction, to_stdlib
    >>> to_fraction(fractions.Fraction(6, 8))
    Fraction(3, 4)
    >>> to_stdlib(to_fraction(3))
    Fraction(3, 1)
"""

from __future__ import annotations
import fractions
from dataclasses import replace
from typing import Iterable, Optional, Union

import numpy as np

from .arith import approximate_ratio
from .config import Precision, get_config
from .fraction import Fraction, IntegerLike


# Type for things that can be converted to Fraction
Numeric = Union[IntegerLike, fractions.Fraction, Fraction]


def to_fraction(x: Numeric) -> Fraction:
    """
    Convert an exact numeric value to a canonical Fraction.

    Args:
        x: A Fraction, an integer, or a fractions.Fraction.

    Returns:
        A Fraction equal to x. Fractions are returned unchanged.

    Raises:
        TypeError: For inexact or unsupported types (floats included).

    Examples:
        >>> to_fraction(5)
        Fraction(5, 1)
        >>> to_fraction(fractions.Fraction(-1, 3))
        Fraction(-1, 3)
    """
    if isinstance(x, Fraction):
        return x
    elif isinstance(x, fractions.Fraction):
        return Fraction(x.numerator, x.denominator)
    elif isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        return Fraction.from_integer(x)
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Fraction exactly")


def to_stdlib(f: Fraction) -> fractions.Fraction:
    """Convert to the standard library's fractions.Fraction."""
    return fractions.Fraction(f.numerator, f.denominator)


def approximate(
    values: Iterable[Numeric],
    precision: Optional[Union[Precision, str]] = None,
) -> np.ndarray:
    """
    Approximate a sequence of fractions as a numpy float array.

    Each element is the same approximation `float()` gives for that value
    under the chosen precision.

    Args:
        values: Fractions or other exact numbers accepted by to_fraction.
        precision: Float precision; defaults to the active Config.

    Returns:
        1-D array of dtype float32 or float64.
    """
    config = get_config()
    if precision is not None:
        config = replace(config, precision=precision)

    return np.array(
        [approximate_ratio(*to_fraction(v).to_tuple(), config) for v in values],
        dtype=config.dtype,
    )
