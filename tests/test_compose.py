"""Behavior tests for compose and pipe."""

from __future__ import annotations

import pytest

from fnutils import compose, pipe

pytestmark = pytest.mark.unit


def add_one(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def test_compose_applies_right_to_left() -> None:
    assert compose(double, add_one)(1) == 4
    assert compose(add_one, double)(1) == 3


def test_compose_is_deferred() -> None:
    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    composed = compose(record, record)
    assert calls == []

    composed(7)
    assert calls == [7, 7]


def test_compose_changes_types() -> None:
    assert compose(str.upper, str)(12) == "12"
    assert compose(len, str)(12345) == 5


def test_pipe_applies_immediately() -> None:
    assert pipe(5, double) == 10


def test_pipe_chains_left_to_right() -> None:
    assert pipe(pipe(5, double), add_one) == 11
