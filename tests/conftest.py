"""Pytest configuration and fixtures.

Provides FNUTILS_* environment isolation and config-cache resets. All fixtures
here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from fnutils.config import reset_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_fnutils_env(request, monkeypatch):
    """Clear FNUTILS_* env vars and the cached Config around each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("FNUTILS_"):
                monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Helpers
# =============================================================================


class Boom(Exception):
    """Distinct exception type so tests can assert identity."""


@pytest.fixture
def boom() -> Boom:
    return Boom("boom")
