# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic request/response models."""

from registrar.models.course import (
    CourseCreateRequest,
    CourseDetail,
    CourseSummary,
    CourseUpdateRequest,
    StudentEnrollRequest,
    StudentResponse,
)

__all__ = [
    "CourseCreateRequest",
    "CourseDetail",
    "CourseSummary",
    "CourseUpdateRequest",
    "StudentEnrollRequest",
    "StudentResponse",
]
