# CanonFrac - Fraction Type
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""
Exact rational numbers kept in canonical form.

A Fraction is a signed numerator over a positive denominator, reduced so the
two share no common factor. Every construction canonicalizes, and every
operation returns a new Fraction: values never change after they are built,
so `a + b` and `a += b` both leave the original `a` object untouched.

Example:
    >>> from canonfrac import Fraction
    >>> Fraction(2, -4)
    Fraction(-1, 2)
    >>> print(Fraction(1, 2) + Fraction(1, 4))
    3/4
    >>> Fraction(1, 2) * 2
    Fraction(1, 1)

Ordering:
    `<` and `>` compare floating-point approximations of the two values
    (at the precision of the active Config), not the exact rationals.
    This is correct for ordinary fractions but can call two distinct values
    unordered when they are closer together than the float precision can
    resolve. `==` and `!=` are always exact, and `<=`/`>=` check exact
    equality before falling back to the approximate ordering.
"""

from __future__ import annotations
import logging
from typing import Any, Optional, Union

import numpy as np

from .arith import approximate_ratio, canonicalize, check_bounds, gcd
from .config import get_config
from .exceptions import DivisionByZero


logger = logging.getLogger(__name__)

# Plain ints and numpy integer scalars; bool is excluded
IntegerLike = Union[int, np.integer]

# Wire form {'n': numerator, 'd': denominator}
FractionDict = dict[str, int]


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(
            f"Fraction {name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


class Fraction:
    """
    An immutable rational number in canonical (reduced) form.

    Construction:
        Fraction()       -> 0/1
        Fraction(n)      -> n/1
        Fraction(n, d)   -> n/d reduced; DivisionByZero if d == 0
        Fraction(f)      -> copy of another Fraction
    """
    __slots__ = ('_numerator', '_denominator')

    def __init__(
        self,
        numerator: Union[IntegerLike, Fraction] = 0,
        denominator: Optional[IntegerLike] = None,
    ):
        if isinstance(numerator, Fraction):
            if denominator is not None:
                raise TypeError("Cannot combine a Fraction with a denominator")
            self._numerator = numerator._numerator
            self._denominator = numerator._denominator
            return

        num = _as_int(numerator, 'numerator')
        den = 1 if denominator is None else _as_int(denominator, 'denominator')
        self._numerator, self._denominator = _canonical_pair(num, den)

    @classmethod
    def from_integer(cls, n: IntegerLike) -> Fraction:
        """Promote an integer to n/1."""
        return cls(n)

    @classmethod
    def from_dict(cls, data: FractionDict) -> Fraction:
        """Build from the {'n': ..., 'd': ...} wire form."""
        return cls(data['n'], data.get('d', 1))

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        """Always positive."""
        return self._denominator

    def reduce(self) -> bool:
        """
        Report whether this value is already reduced.

        Live fractions are canonical, so this is always True; it is the
        no-op case of canonicalization. Use `canonicalize(n, d)` from
        canonfrac.arith to test an arbitrary pair, which reports False
        whenever the pair needed rewriting.
        """
        return canonicalize(self._numerator, self._denominator)[2]

    # Arithmetic

    def add(self, other: Union[Fraction, IntegerLike]) -> Fraction:
        """Return self + other."""
        return _add(self, _require(other), 1)

    def subtract(self, other: Union[Fraction, IntegerLike]) -> Fraction:
        """Return self - other."""
        return _add(self, _require(other), -1)

    def multiply(self, other: Union[Fraction, IntegerLike]) -> Fraction:
        """Return self * other."""
        return _mul(self, _require(other))

    def divide(self, other: Union[Fraction, IntegerLike]) -> Fraction:
        """
        Return self / other.

        Raises:
            DivisionByZero: If other is zero.
        """
        return _div(self, _require(other))

    def invert(self) -> Fraction:
        """
        Return 1 / self.

        Raises:
            DivisionByZero: If self is zero.
        """
        if self._numerator == 0:
            logger.debug("Attempted to invert zero")
            raise DivisionByZero('invert')
        return _build(self._denominator, self._numerator)

    def __add__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _add(self, other, 1)

    def __radd__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _add(other, self, 1)

    def __sub__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _add(self, other, -1)

    def __rsub__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _add(other, self, -1)

    def __mul__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _mul(self, other)

    def __rmul__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _mul(other, self)

    def __truediv__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _div(self, other)

    def __rtruediv__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _div(other, self)

    def __neg__(self) -> Fraction:
        return _build(-self._numerator, self._denominator)

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        if self._numerator >= 0:
            return self
        return -self

    # Comparison

    def equals(self, other: Union[Fraction, IntegerLike]) -> bool:
        """Exact equality; canonical pairs compare structurally."""
        other = _require(other)
        return (self._numerator == other._numerator
                and self._denominator == other._denominator)

    def compare(self, other: Union[Fraction, IntegerLike]) -> int:
        """
        Three-way comparison: -1, 0 or 1.

        Exact equality gives 0. Otherwise the float approximations decide,
        and two distinct values that approximate to the same float also
        give 0.
        """
        other = _require(other)
        if self.equals(other):
            return 0
        if self._greater(other):
            return 1
        if self._less(other):
            return -1
        return 0

    def __eq__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self.equals(other)

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._greater(other)

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._less(other)

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        # Exact equality first; it is precise where the ordering is not
        return self.equals(other) or self._greater(other)

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.equals(other) or self._less(other)

    def __hash__(self) -> int:
        # Integral values hash like the int they equal
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def _greater(self, other: Fraction) -> bool:
        return bool(self._approx() > other._approx())

    def _less(self, other: Fraction) -> bool:
        return bool(self._approx() < other._approx())

    def _approx(self) -> np.floating:
        return approximate_ratio(self._numerator, self._denominator, get_config())

    # Conversions

    def to_float(self) -> float:
        """Approximate value; lossy by nature."""
        return float(self._approx())

    def to_bool(self) -> bool:
        """True for any nonzero value."""
        return self._numerator != 0

    def to_string(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def to_tuple(self) -> tuple[int, int]:
        return self._numerator, self._denominator

    def to_dict(self) -> FractionDict:
        """Convert to the {'n': ..., 'd': ...} wire form."""
        return {'n': self._numerator, 'd': self._denominator}

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.to_bool()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


def _canonical_pair(numerator: int, denominator: int) -> tuple[int, int]:
    num, den, _ = canonicalize(numerator, denominator)
    bits = get_config().int_bits
    return check_bounds(num, bits), check_bounds(den, bits)


def _build(numerator: int, denominator: int) -> Fraction:
    # Skips argument validation; callers pass plain ints
    result = Fraction.__new__(Fraction)
    result._numerator, result._denominator = _canonical_pair(numerator, denominator)
    return result


def _coerce(value: Any) -> Optional[Fraction]:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return Fraction.from_integer(value)
    return None


def _require(value: Any) -> Fraction:
    result = _coerce(value)
    if result is None:
        raise TypeError(
            f"Expected Fraction or integer, got {type(value).__name__}"
        )
    return result


def _add(left: Fraction, right: Fraction, sign: int) -> Fraction:
    # Denominators are positive, so g divides both without sign handling
    g = gcd(left._denominator, right._denominator)
    numerator = (right._denominator // g * left._numerator
                 + sign * (left._denominator // g * right._numerator))
    denominator = left._denominator // g * right._denominator
    return _build(numerator, denominator)


def _mul(left: Fraction, right: Fraction) -> Fraction:
    return _build(left._numerator * right._numerator,
                  left._denominator * right._denominator)


def _div(left: Fraction, right: Fraction) -> Fraction:
    if right._numerator == 0:
        logger.debug("Attempted to divide %s by zero", left)
        raise DivisionByZero('divide')
    return _build(left._numerator * right._denominator,
                  left._denominator * right._numerator)
