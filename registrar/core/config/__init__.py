# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the course registration service.

Example:
    >>> from registrar.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from registrar.core.config.settings import (
    APISettings,
    CORSSettings,
    DatabaseSettings,
    RegistrationSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "DatabaseSettings",
    "RegistrationSettings",
    "CORSSettings",
    "APISettings",
]
