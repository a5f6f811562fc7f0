"""fnutils: small functional helpers.

Public API:
    - IO: Lazy deferred effect with map/flat_map and three run modes
    - Success, Failure, Outcome: Result of ``IO.attempt()``
    - zip2, zip3, sequence, fold: Combinators over optional values
    - compose, pipe: Function composition
    - Config: Failure-diagnostics configuration
"""

from __future__ import annotations

import logging

from fnutils.compose import compose, pipe
from fnutils.config import Config, get_config, reset_config
from fnutils.effect import IO
from fnutils.errors import ConfigurationError, FnUtilsError
from fnutils.optional import fold, sequence, zip2, zip3
from fnutils.outcome import Failure, Outcome, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fnutils")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fnutils").addHandler(logging.NullHandler())

__all__ = [
    "IO",
    "Config",
    "ConfigurationError",
    "Failure",
    "FnUtilsError",
    "Outcome",
    "Success",
    "compose",
    "fold",
    "get_config",
    "pipe",
    "reset_config",
    "sequence",
    "zip2",
    "zip3",
]
