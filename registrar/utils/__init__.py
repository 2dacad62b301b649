# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
"""

from registrar.utils.logging import (
    bind_context,
    clear_context,
    get_logger,
    remove_log_handler,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "remove_log_handler",
    "get_logger",
    "bind_context",
    "clear_context",
]
