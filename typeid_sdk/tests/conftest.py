"""
typeid_sdk test configuration.

Tests run with error capture disabled by default. Override by setting
environment variables before running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Force test settings ────────────────────────────────────────────────────
# These must be set before any typeid_sdk modules read their config.

os.environ.setdefault("TYPEID_ENV", "test")
os.environ.setdefault("TYPEID_ERROR_BACKEND", "none")
os.environ.setdefault("TYPEID_LOG_LEVEL", "INFO")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_config():
    """Clear the cached settings so env changes made in a test stay local to it."""
    from typeid_sdk.tier0_core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def capture_rejections(monkeypatch):
    """Enable TYPEID_ERROR_BACKEND=log and warm up the structlog configuration."""
    from typeid_sdk.tier0_core.config import _reset_config
    from typeid_sdk.tier0_core.logging import get_logger

    monkeypatch.setenv("TYPEID_ERROR_BACKEND", "log")
    _reset_config()
    # Configure structlog now so capture_logs() is not overridden mid-test.
    get_logger(__name__)


@pytest.fixture
def uuid_text() -> str:
    return "01889c89-df6b-7f1c-a388-91396ec314bc"
