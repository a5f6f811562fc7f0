"""IO: a lazy, composable wrapper around a side-effecting computation.

Nothing runs until one of the execution methods is called, and every call runs
the computation again. There is no memoization of results or side effects.

Failure policy per execution method:
- ``run_sync``: the exception propagates unchanged.
- ``run_or_default``: the exception is logged and ``None`` is returned.
- ``attempt``: the exception is captured into a ``Failure``.

``map`` and ``flat_map`` never catch; a failure upstream skips the transform.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fnutils.config import Config, get_config
from fnutils.errors import ConfigurationError
from fnutils.outcome import Failure, Outcome, Success

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def _failure_config() -> Config:
    """Config for the failure record; a bad environment falls back to defaults."""
    try:
        return get_config()
    except ConfigurationError as err:
        logger.warning("Ignoring invalid fnutils configuration: %s", err)
        return Config()


class IO[T]:
    """A deferred effect producing ``T`` when run.

    Example:
        counter = 0

        def tick() -> int:
            nonlocal counter
            counter += 1
            return counter

        io = IO.of(tick).map(lambda n: n * 10)
        io.run_sync()  # 10
        io.run_sync()  # 20, the effect runs again
    """

    __slots__ = ("_effect",)

    def __init__(self, effect: Callable[[], T]) -> None:
        object.__setattr__(self, "_effect", effect)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"IO({self._effect!r})"

    # --- Construction ---

    @classmethod
    def of(cls, effect: Callable[[], T]) -> IO[T]:
        """Wrap a computation that may raise. Does not run it."""
        return cls(effect)

    @classmethod
    def pure(cls, value: T) -> IO[T]:
        """Wrap a plain value with no side effects."""
        return cls(lambda: value)

    # --- Composition ---

    def map[R](self, mapper: Callable[[T], R]) -> IO[R]:
        """Transform the result; ``mapper`` is not called if the effect raises."""
        effect = self._effect
        return IO(lambda: mapper(effect()))

    def flat_map[R](self, mapper: Callable[[T], IO[R]]) -> IO[R]:
        """Chain another IO built from this one's result."""
        effect = self._effect
        return IO(lambda: mapper(effect()).run_sync())

    # --- Execution ---

    def run_sync(self) -> T:
        """Run the effect on the calling thread and return its value.

        Any exception raised by the computation propagates as-is.
        """
        return self._effect()

    unsafe_run_sync = run_sync

    def run_or_default(self) -> T | None:
        """Run the effect, returning ``None`` instead of raising.

        The cause is only reported through the ``fnutils.effect`` logger;
        callers cannot inspect it. Use :meth:`attempt` when the error matters.
        """
        try:
            return self._effect()
        except Exception as exc:
            config = _failure_config()
            if config.log_failures:
                logger.log(config.level, "IO Error: %s", exc)
            return None

    run_to_nullable = run_or_default

    def attempt(self) -> Outcome[T]:
        """Run the effect and return ``Success(value)`` or ``Failure(error)``."""
        try:
            return Success(self._effect())
        except Exception as exc:
            return Failure(exc)
