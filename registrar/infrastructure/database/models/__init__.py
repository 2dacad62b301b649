# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ORM models for the registration database.

Importing this package registers every table on Base.metadata.
"""

from registrar.infrastructure.database.models.base import Base
from registrar.infrastructure.database.models.course import (
    Course,
    CourseRegistration,
    CourseTemplate,
    WaitingListEntry,
)
from registrar.infrastructure.database.models.student import Student

__all__ = [
    "Base",
    "Course",
    "CourseRegistration",
    "CourseTemplate",
    "Student",
    "WaitingListEntry",
]
