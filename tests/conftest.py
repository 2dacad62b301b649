# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Generator
from datetime import datetime
from typing import Any

import pytest
import structlog

from registrar.core.config import clear_settings_cache
from registrar.utils.logging import clear_context, remove_log_handler


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_environment() -> dict[str, str]:
    """Provide test environment variables.

    Returns:
        Dictionary of environment variables for testing.
    """
    return {
        "ENVIRONMENT": "development",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "REGISTRATION_DEFAULT_SEMESTER": "20153",
    }


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def fresh_logging() -> Generator[None, None, None]:
    """Undo logging configuration made by create_app() or setup_logging()."""
    yield
    clear_context()
    remove_log_handler()
    structlog.reset_defaults()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_ssn() -> str:
    """Provide a sample student SSN for testing."""
    return "1212882659"


@pytest.fixture
def sample_course_data() -> dict[str, Any]:
    """Provide sample course creation data for testing."""
    return {
        "template_id": "T-514-VEFT",
        "start_date": datetime(2015, 8, 17),
        "end_date": datetime(2015, 11, 8),
        "semester": "20153",
        "max_students": 2,
    }
