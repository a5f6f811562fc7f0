"""Function composition helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Compose right to left: ``compose(f, g)(x) == f(g(x))``."""

    def _composed(x: A) -> C:
        return f(g(x))

    return _composed


def pipe(value: A, f: Callable[[A], B]) -> B:
    """Apply ``f`` to ``value`` now; reads left to right when nested."""
    return f(value)


__all__ = ["compose", "pipe"]
