"""Helpers for lists and other iterables."""
from __future__ import annotations

import random
from typing import Callable, Hashable, Iterable, List, MutableSequence, Optional, Sequence, TypeVar

from .errors import EmptySequenceError
from .numeric import resolve_rng

T = TypeVar("T")


def any_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return ``True`` as soon as one item satisfies ``predicate``."""

    for item in items:
        if predicate(item):
            return True
    return False


def none_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return ``True`` when no item satisfies ``predicate``."""

    for item in items:
        if predicate(item):
            return False
    return True


def count_where(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for item in items if predicate(item))


def is_unique(items: Iterable[Hashable]) -> bool:
    """Return ``True`` when every item appears exactly once."""

    values = list(items)
    return len(values) == len(set(values))


def total(items: Iterable[float]) -> float:
    return sum(items, 0)


def average(items: Iterable[float]) -> float:
    """Arithmetic mean of ``items``.

    Raises :class:`EmptySequenceError` for an empty input.
    """

    values = list(items)
    if not values:
        raise EmptySequenceError("Cannot average an empty sequence")
    return total(values) / len(values)


def indexes_of(items: Iterable[T], target: T) -> List[int]:
    """Every position where ``target`` occurs, in ascending order."""

    return [index for index, item in enumerate(items) if item == target]


def remove_all(items: MutableSequence[T], target: T) -> None:
    """Remove every element equal to ``target`` from ``items`` in place."""

    items[:] = [item for item in items if item != target]


def shuffle(items: MutableSequence[T], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``items`` in place with a uniform permutation."""

    resolve_rng(rng).shuffle(items)


def shuffled(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of ``items``."""

    result = list(items)
    shuffle(result, rng)
    return result


def sample(items: Sequence[T], count: int, rng: Optional[random.Random] = None) -> List[T]:
    """Pick ``count`` items without replacement.

    The whole sequence is shuffled and the first ``min(count, len(items))``
    entries are returned.
    """

    if count < 0:
        raise ValueError(f"Sample size must be non-negative, got {count}")
    return shuffled(items, rng)[:count]


__all__ = [
    "any_match",
    "none_match",
    "count_where",
    "is_unique",
    "total",
    "average",
    "indexes_of",
    "remove_all",
    "shuffle",
    "shuffled",
    "sample",
]
