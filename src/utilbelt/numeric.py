"""Clamping, interpolation and random number helpers."""
from __future__ import annotations

import math
import random
from typing import Optional, TypeVar

from .errors import InvalidRangeError

T = TypeVar("T", int, float)

E = math.e
LOG2E = math.log2(math.e)
LOG10E = math.log10(math.e)
LN2 = math.log(2.0)
LN10 = math.log(10.0)
PI_2 = math.pi / 2.0
PI_4 = math.pi / 4.0
SQRT2 = math.sqrt(2.0)
SQRT1_2 = math.sqrt(0.5)

# Shared generator used when callers do not pass their own.
_default_rng = random.Random()


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """Return ``rng`` or the process-wide default generator."""

    return _default_rng if rng is None else rng


def clamp(value: T, low: T, high: T) -> T:
    """Clamp ``value`` between ``low`` and ``high`` (both inclusive).

    Raises :class:`InvalidRangeError` when ``low`` is greater than ``high``.
    """

    if low > high:
        raise InvalidRangeError(f"Lower bound {low!r} is greater than upper bound {high!r}")
    if value > high:
        return high
    if value < low:
        return low
    return value


def _hermite(value1: float, tangent1: float, value2: float, tangent2: float, amount: float) -> float:
    if amount == 0:
        return value1
    if amount == 1:
        return value2
    amount_sq = amount * amount
    amount_cu = amount_sq * amount
    a = (2 * value1 - 2 * value2 + tangent2 + tangent1) * amount_cu
    b = (3 * value2 - 3 * value1 - 2 * tangent1 - tangent2) * amount_sq
    c = tangent1 * amount + value1
    return a + b + c


def lerp(a: float, b: float, amount: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``amount`` (clamped to ``[0, 1]``)."""

    t = clamp(amount, 0.0, 1.0)
    return a + (b - a) * t


def smooth_step(a: float, b: float, amount: float) -> float:
    """Cubic ease from ``a`` to ``b`` with flat tangents at both ends."""

    t = clamp(amount, 0.0, 1.0)
    return _hermite(a, 0.0, b, 0.0, t)


def smooth_step2(a: float, b: float, amount: float) -> float:
    """Ease from ``a`` to ``b`` and back again.

    ``amount`` of 0 and 1 give ``a``; 0.5 gives ``b``.
    """

    t = clamp(amount, 0.0, 1.0)
    if t > 0.5:
        return _hermite(b, 0.0, a, 0.0, (t - 0.5) * 2.0)
    return _hermite(a, 0.0, b, 0.0, t * 2.0)


def random01(rng: Optional[random.Random] = None) -> float:
    """Uniform random float in ``[0, 1)``."""

    return resolve_rng(rng).random()


def random_int(upper_bound: int, rng: Optional[random.Random] = None) -> int:
    """Uniform random integer in ``[0, upper_bound)``."""

    if upper_bound <= 0:
        raise ValueError(f"upper_bound must be positive, got {upper_bound}")
    return resolve_rng(rng).randrange(upper_bound)


def is_odd(value: int) -> bool:
    return value % 2 == 1


def is_even(value: int) -> bool:
    return value % 2 == 0


def ordinal(value: int) -> str:
    """Format ``value`` with its English ordinal suffix, e.g. ``"23rd"``."""

    magnitude = abs(value)
    if 11 <= magnitude % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")
    return f"{value}{suffix}"


__all__ = [
    "E",
    "LOG2E",
    "LOG10E",
    "LN2",
    "LN10",
    "PI_2",
    "PI_4",
    "SQRT2",
    "SQRT1_2",
    "resolve_rng",
    "clamp",
    "lerp",
    "smooth_step",
    "smooth_step2",
    "random01",
    "random_int",
    "is_odd",
    "is_even",
    "ordinal",
]
