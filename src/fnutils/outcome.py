"""Execution outcome of a deferred effect.

``IO.attempt()`` converts a raised exception into data instead of letting it
propagate. The outcome is always exactly one of :class:`Success` or
:class:`Failure`.
"""

from __future__ import annotations

import dataclasses
import typing

TSuccess = typing.TypeVar("TSuccess")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """The computation completed and produced ``value``."""

    value: TSuccess

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_or_none(self) -> TSuccess:
        return self.value

    def get_or_raise(self) -> TSuccess:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """The computation raised ``error``."""

    error: TFailure

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def message(self) -> str:
        """Text of the captured exception."""
        return str(self.error)

    def get_or_none(self) -> None:
        return None

    def get_or_raise(self) -> typing.NoReturn:
        """Re-raise the captured exception unchanged."""
        raise self.error


Outcome = Success[TSuccess] | Failure[Exception]
