"""Null-safe combinators over optional values.

``None`` is the only absent value. Falsy values such as ``0``, ``""`` or
``[]`` are present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")
R = TypeVar("R")


def zip2(a: A | None, b: B | None, combiner: Callable[[A, B], R]) -> R | None:
    """Apply ``combiner`` only if both values are present."""
    if a is None or b is None:
        return None
    return combiner(a, b)


def zip3(
    a: A | None,
    b: B | None,
    c: C | None,
    combiner: Callable[[A, B, C], R],
) -> R | None:
    """Apply ``combiner`` only if all three values are present."""
    if a is None or b is None or c is None:
        return None
    return combiner(a, b, c)


def sequence(values: Iterable[T | None]) -> list[T] | None:
    """Turn a collection of optionals into an optional list.

    If any element is absent the whole result is ``None``. An empty input
    yields ``[]``.

    Example:
        sequence([lookup(a), lookup(b)])  # every lookup must succeed
    """
    result: list[T] = []
    for value in values:
        if value is None:
            return None
        result.append(value)
    return result


def fold(
    value: T | None,
    if_absent: Callable[[], R],
    if_present: Callable[[T], R],
) -> R:
    """Expression-form if/else over presence; exactly one branch runs."""
    if value is None:
        return if_absent()
    return if_present(value)


__all__ = ["fold", "sequence", "zip2", "zip3"]
