# CanonFrac - Integer Helpers
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""
Integer helpers behind fraction canonicalization.

Example:
    >>> from canonfrac.arith import gcd, canonicalize
    >>> gcd(12, 18)
    6
    >>> canonicalize(2, -4)
    (-1, 2, False)
"""

from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    from .config import Config

from .exceptions import DivisionByZero, FractionOverflowError


logger = logging.getLogger(__name__)


def gcd(x: int, y: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Operates on magnitudes, so the result is never negative.
    gcd(x, 0) is |x|, and gcd(0, 0) is 0.
    """
    x, y = abs(x), abs(y)
    while y:
        x, y = y, x % y
    return x


def lcm(x: int, y: int) -> int:
    """Least common multiple of the magnitudes; 0 if either argument is 0."""
    if x == 0 or y == 0:
        return 0
    return abs(x) // gcd(x, y) * abs(y)


def canonicalize(numerator: int, denominator: int) -> tuple[int, int, bool]:
    """
    Rewrite numerator/denominator into canonical form.

    The canonical pair is coprime with a positive denominator, so the sign
    lives on the numerator and zero becomes 0/1.

    Args:
        numerator: Signed numerator.
        denominator: Signed, nonzero denominator.

    Returns:
        (numerator, denominator, already_reduced). already_reduced is True
        when the input was canonical and has been returned unchanged.

    Raises:
        DivisionByZero: If denominator is 0.
    """
    if denominator == 0:
        logger.debug("Rejected zero denominator for numerator %d", numerator)
        raise DivisionByZero('construct')

    g = gcd(numerator, denominator)
    if g == 1 and denominator >= 0:
        return numerator, denominator, True

    sign = -1 if (numerator < 0) ^ (denominator < 0) else 1
    return sign * (abs(numerator) // g), abs(denominator) // g, False


def check_bounds(value: int, bits: Optional[int]) -> int:
    """
    Return value unchanged if it fits a signed `bits`-bit integer.

    Raises:
        FractionOverflowError: If bits is set and value is out of range.
    """
    if bits is None:
        return value
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        logger.debug("Overflow: %d exceeds %d bits", value, bits)
        raise FractionOverflowError(value, bits)
    return value


# Widest integers that convert to float64 without overflowing
_PER_PART_MAX_BITS = 64


def approximate_ratio(numerator: int, denominator: int, config: Config) -> np.floating:
    """
    Floating approximation of numerator / denominator in config.dtype.

    Under a fixed integer width of at most 64 bits, each part is converted
    to the float type before dividing, like a C cast of an int pair. Wider
    or unbounded integers use Python's correctly rounded int division
    instead, so parts too large for a float still give a finite result
    whenever the quotient fits; quotients beyond the float range become
    signed infinity.
    """
    dtype = config.dtype
    if config.int_bits is not None and config.int_bits <= _PER_PART_MAX_BITS:
        return dtype(numerator) / dtype(denominator)
    try:
        quotient = numerator / denominator
    except OverflowError:
        # denominator is positive, so the sign comes from the numerator
        quotient = math.copysign(math.inf, numerator)
    return dtype(quotient)
