# CanonFrac - Configuration
# Copyright (c) 2024 CanonFrac Contributors. All rights reserved.

"""
Configuration settings for CanonFrac.

The active configuration is context-local, so threads and asyncio tasks can
each run with their own settings.

Example:
    >>> from canonfrac.config import Config, using
    >>> with using(Config.int32()):
    ...     pass  # arithmetic here is bounded to 32-bit integers
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

import numpy as np

from .exceptions import ConfigError


logger = logging.getLogger(__name__)


class Precision(Enum):
    """Floating-point precision used for approximations and ordering."""
    SINGLE = "single"
    DOUBLE = "double"


_DTYPES = {
    Precision.SINGLE: np.float32,
    Precision.DOUBLE: np.float64,
}


@dataclass(frozen=True)
class Config:
    """
    Configuration for fraction arithmetic.

    Attributes:
        precision: Floating-point precision of float() conversions and of
                   the approximate ordering comparisons.
        int_bits: Width of a signed integer that every numerator and
                  denominator must fit in. None means unbounded.
    """
    precision: Precision = Precision.DOUBLE
    int_bits: Optional[int] = None

    def __post_init__(self):
        # Accept the enum value as a plain string
        if isinstance(self.precision, str):
            try:
                object.__setattr__(self, 'precision', Precision(self.precision))
            except ValueError:
                raise ConfigError(f"Unknown precision: '{self.precision}'") from None
        if not isinstance(self.precision, Precision):
            raise ConfigError(f"Invalid precision: {self.precision!r}")
        if self.int_bits is not None:
            if isinstance(self.int_bits, bool) or not isinstance(self.int_bits, int):
                raise ConfigError(f"int_bits must be an integer, got {self.int_bits!r}")
            if self.int_bits < 2:
                raise ConfigError(f"int_bits must be at least 2, got {self.int_bits}")

    @classmethod
    def default(cls) -> Config:
        """Unbounded integers with double precision approximations."""
        return cls()

    @classmethod
    def single_precision(cls) -> Config:
        """Unbounded integers with single precision approximations."""
        return cls(precision=Precision.SINGLE)

    @classmethod
    def int32(cls) -> Config:
        """32-bit integers and single precision floats, like a C int/float pair."""
        return cls(precision=Precision.SINGLE, int_bits=32)

    @property
    def dtype(self) -> type:
        """numpy scalar type used for floating approximations."""
        return _DTYPES[self.precision]

    def int_range(self) -> Optional[tuple[int, int]]:
        """Inclusive (min, max) bounds for integers, or None when unbounded."""
        if self.int_bits is None:
            return None
        return -(1 << (self.int_bits - 1)), (1 << (self.int_bits - 1)) - 1

    def to_dict(self) -> dict:
        return {
            'precision': self.precision.value,
            'intBits': self.int_bits,
        }

    def __repr__(self) -> str:
        return (
            f"Config(precision={self.precision.value}, "
            f"int_bits={self.int_bits})"
        )


_active: ContextVar[Config] = ContextVar('canonfrac_config', default=Config())


def get_config() -> Config:
    """Return the configuration active in the current context."""
    return _active.get()


def set_config(config: Union[Config, None]) -> Config:
    """
    Replace the active configuration.

    Args:
        config: New configuration. None restores the default.

    Returns:
        The previously active configuration.
    """
    if config is None:
        config = Config()
    elif not isinstance(config, Config):
        raise TypeError(f"Expected Config, got {type(config).__name__}")
    previous = _active.get()
    _active.set(config)
    logger.debug("Active config changed: %r -> %r", previous, config)
    return previous


@contextmanager
def using(config: Config) -> Iterator[Config]:
    """Run a block with `config` active, restoring the previous one afterwards."""
    if not isinstance(config, Config):
        raise TypeError(f"Expected Config, got {type(config).__name__}")
    token = _active.set(config)
    logger.debug("Entering config %r", config)
    try:
        yield config
    finally:
        _active.reset(token)
        logger.debug("Restored config %r", _active.get())
