# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for structured logging setup."""

import json
import logging

from registrar.core.config import Settings
from registrar.utils.logging import (
    LOG_HANDLER_NAME,
    bind_context,
    get_logger,
    setup_logging,
)


def _json_settings() -> Settings:
    return Settings(environment="staging", debug=False, log_level="INFO", _env_file=None)  # type: ignore[call-arg]


def _last_json_line(output: str) -> dict:
    lines = [line for line in output.splitlines() if line.strip()]
    return json.loads(lines[-1])


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_structlog_event_with_keywords(self, capsys):
        """Test service style events render with their keywords and bound context."""
        setup_logging(_json_settings())
        bind_context(request_id="req-1")

        get_logger("registrar.domains.course.service").info("course_created", course_id=7)

        line = _last_json_line(capsys.readouterr().out)
        assert line["event"] == "course_created"
        assert line["course_id"] == 7
        assert line["request_id"] == "req-1"
        assert line["level"] == "info"
        assert line["logger"] == "registrar.domains.course.service"

    def test_stdlib_record_carries_bound_context(self, capsys):
        """Test plain logging records get the bound request id."""
        setup_logging(_json_settings())
        bind_context(request_id="req-2", method="POST")

        logging.getLogger("registrar.api.v1.courses").info("Creating course: %s", "T-514-VEFT")

        line = _last_json_line(capsys.readouterr().out)
        assert line["event"] == "Creating course: T-514-VEFT"
        assert line["request_id"] == "req-2"
        assert line["method"] == "POST"

    def test_level_filters_debug(self, capsys):
        """Test events below the configured level are dropped."""
        setup_logging(_json_settings())

        get_logger("registrar.tests").debug("hidden_event")

        assert "hidden_event" not in capsys.readouterr().out

    def test_console_output_in_development(self, capsys):
        """Test development renders readable console lines."""
        settings = Settings(environment="development", log_level="DEBUG", _env_file=None)  # type: ignore[call-arg]
        setup_logging(settings)

        get_logger("registrar.tests").info("student_enrolled", ssn="1212882659")

        out = capsys.readouterr().out
        assert "student_enrolled" in out
        assert "1212882659" in out

    def test_repeated_setup_installs_one_handler(self):
        """Test calling setup twice replaces the handler."""
        setup_logging(_json_settings())
        setup_logging(_json_settings())

        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(LOG_HANDLER_NAME) == 1
