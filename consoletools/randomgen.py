"""Uniform random value generators.

Two closed distribution variants exist: ``IntegerRange`` (inclusive integer
bounds) and ``RealRange`` (float bounds). The variant is chosen when the
generator is built, so drawing a value never inspects types at runtime.
"""

from __future__ import annotations

import math
import random
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import TypeVar

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

T = TypeVar("T")


class InvalidRangeError(ValueError):
    """Raised when a distribution's minimum exceeds its maximum."""


@dataclass(frozen=True)
class IntegerRange:
    minimum: int = INT32_MIN
    maximum: int = INT32_MAX

    def __post_init__(self) -> None:
        for value in (self.minimum, self.maximum):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"integer bound expected, got {value!r}")
        if self.minimum > self.maximum:
            raise InvalidRangeError(f"minimum {self.minimum} exceeds maximum {self.maximum}")

    def sample(self, rng: random.Random) -> int:
        return rng.randint(self.minimum, self.maximum)


@dataclass(frozen=True)
class RealRange:
    minimum: float = 0.0
    maximum: float = 1.0

    def __post_init__(self) -> None:
        for value in (self.minimum, self.maximum):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise TypeError(f"finite real bound expected, got {value!r}")
        if self.minimum > self.maximum:
            raise InvalidRangeError(f"minimum {self.minimum} exceeds maximum {self.maximum}")

    def sample(self, rng: random.Random) -> float:
        return rng.uniform(self.minimum, self.maximum)


Distribution = IntegerRange | RealRange


def _default_rng() -> random.Random:
    # Seeded from os.urandom when no seed is given.
    return random.Random()


class RandomGenerator:
    """Draw values from one fixed distribution."""

    def __init__(self, distribution: Distribution, rng: random.Random | None = None) -> None:
        self.distribution = distribution
        self._rng = rng if rng is not None else _default_rng()

    def next(self) -> int | float:
        return self.distribution.sample(self._rng)

    def take(self, count: int) -> list[int | float]:
        """Draw ``count`` values in sequence."""
        if count < 0:
            raise ValueError("count must be >= 0")
        return [self.next() for _ in range(count)]


def shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> None:
    """Shuffle ``items`` in place."""
    (rng if rng is not None else _default_rng()).shuffle(items)


__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "InvalidRangeError",
    "IntegerRange",
    "RealRange",
    "Distribution",
    "RandomGenerator",
    "shuffle",
]
