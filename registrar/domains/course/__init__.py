# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain package.

This package provides course registration functionality including:
- Course offering management
- Student enrollment and withdrawal
- Waiting lists
"""

from registrar.domains.course.service import (
    AlreadyEnrolledError,
    AlreadyInCourseError,
    AlreadyOnWaitingListError,
    BadRequestError,
    ConflictError,
    CourseFullError,
    CourseNotFoundError,
    CourseService,
    CourseServiceError,
    CourseTemplateNotFoundError,
    DataIntegrityError,
    InvalidCourseError,
    NotEnrolledError,
    NotFoundError,
    PreconditionFailedError,
    RegistrationNotFoundError,
    ServerError,
    StudentNotFoundError,
)

__all__ = [
    "CourseService",
    "CourseServiceError",
    # Error kinds
    "NotFoundError",
    "PreconditionFailedError",
    "ConflictError",
    "BadRequestError",
    "ServerError",
    # Concrete errors
    "CourseNotFoundError",
    "CourseTemplateNotFoundError",
    "StudentNotFoundError",
    "RegistrationNotFoundError",
    "CourseFullError",
    "AlreadyEnrolledError",
    "NotEnrolledError",
    "AlreadyInCourseError",
    "AlreadyOnWaitingListError",
    "InvalidCourseError",
    "DataIntegrityError",
]
