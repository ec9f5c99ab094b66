# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
from datetime import datetime

import pytest

from cronkit.core.config import Settings
from cronkit.core.logging import LOGGER_NAMESPACE

# Friday afternoon; every occurrence test uses an explicit reference instant.
REFERENCE_NOW = datetime(2026, 2, 20, 14, 30, 0)


@pytest.fixture
def now() -> datetime:
    return REFERENCE_NOW


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings isolated from any CRONKIT_* variables in the environment."""
    for key in ("DEFAULT_COUNT", "MAX_COUNT", "SEARCH_HORIZON_DAYS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"CRONKIT_{key}", raising=False)
    return Settings()


@pytest.fixture(autouse=True)
def _reset_cronkit_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
