"""Configuration: frozen Config resolved once from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import logging
import os

from dotenv import load_dotenv

from fnutils.errors import ConfigurationError

load_dotenv()

_LOG_LEVEL_ENV_VAR = "FNUTILS_FAILURE_LOG_LEVEL"
_LOG_FAILURES_ENV_VAR = "FNUTILS_LOG_FAILURES"

_LEVEL_NAMES: frozenset[str] = frozenset(logging.getLevelNamesMapping())
_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSY: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the failure diagnostics of ``IO``.

    ``IO.run_or_default()`` swallows exceptions and reports them only through
    logging; these fields control that side channel.

    Example:
        config = Config(failure_log_level="error")
        assert config.level == logging.ERROR
    """

    #: Level used for the "IO Error: ..." record emitted by ``run_or_default``.
    failure_log_level: str = "WARNING"
    #: When *False*, suppressed failures are not logged at all.
    log_failures: bool = True

    def __post_init__(self) -> None:
        """Normalize and validate the log level."""
        if not isinstance(self.failure_log_level, str):
            raise ConfigurationError(
                f"failure_log_level must be a string, got {type(self.failure_log_level).__name__}",
                hint=f"Use one of: {', '.join(sorted(_LEVEL_NAMES))}",
            )
        level = self.failure_log_level.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ConfigurationError(
                f"Unknown log level: {self.failure_log_level!r}",
                hint=f"Use one of: {', '.join(sorted(_LEVEL_NAMES))}",
            )
        object.__setattr__(self, "failure_log_level", level)

        if not isinstance(self.log_failures, bool):
            raise ConfigurationError(
                f"log_failures must be a bool, got {self.log_failures!r}",
            )

    @property
    def level(self) -> int:
        """Numeric logging level for ``failure_log_level``."""
        return logging.getLevelNamesMapping()[self.failure_log_level]

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``FNUTILS_*`` environment variables."""
        level = os.environ.get(_LOG_LEVEL_ENV_VAR) or "WARNING"
        raw_flag = os.environ.get(_LOG_FAILURES_ENV_VAR)
        return cls(failure_log_level=level, log_failures=_parse_bool(raw_flag))


def _parse_bool(raw: str | None) -> bool:
    if raw is None or not raw.strip():
        return True
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {_LOG_FAILURES_ENV_VAR}: {raw!r}",
        hint="Use 1/0, true/false, yes/no or on/off.",
    )


@cache
def get_config() -> Config:
    """Return the process-wide Config, resolving it from the environment once."""
    return Config.from_env()


def reset_config() -> None:
    """Drop the cached Config so the next ``get_config()`` re-reads the environment."""
    get_config.cache_clear()
