# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course registration request/response schemas.

This module defines the Pydantic models exchanged between the course
service and its callers.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def to_naive_utc(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive UTC; naive values pass through."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Course dates are stored without timezone; offsets in requests are folded into UTC
CourseDate = Annotated[datetime, AfterValidator(to_naive_utc)]


class StudentResponse(BaseModel):
    """A student as shown in rosters and waiting lists."""

    name: str = Field(description="Student full name")
    ssn: str = Field(description="Student SSN")


class CourseSummary(BaseModel):
    """Course as shown in listings and mutation results.

    Attributes:
        id: Course identifier.
        start_date: First day of teaching.
        end_date: Last day of teaching.
        name: Name of the course template.
        semester: Semester code, e.g. "20153".
        student_count: Number of registrations counted for the course.
    """

    id: int
    start_date: datetime
    end_date: datetime
    name: str
    semester: str
    student_count: int = Field(ge=0)


class CourseDetail(CourseSummary):
    """Course with its full roster.

    The roster lists every student with a registration row for the
    course, withdrawn students included.
    """

    students: list[StudentResponse] = Field(default_factory=list)


class CourseCreateRequest(BaseModel):
    """Request to create a course from a template."""

    model_config = ConfigDict(str_strip_whitespace=True)

    template_id: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Code of an existing course template",
        examples=["T-514-VEFT"],
    )
    start_date: CourseDate
    end_date: CourseDate
    semester: str = Field(
        ...,
        min_length=1,
        max_length=10,
        examples=["20153"],
    )
    max_students: int = Field(..., ge=0, description="Seat cap for active registrations")


class CourseUpdateRequest(BaseModel):
    """Request to change a course's dates."""

    start_date: CourseDate
    end_date: CourseDate


class StudentEnrollRequest(BaseModel):
    """Identifies a student by SSN for enrollment or waiting list actions."""

    model_config = ConfigDict(str_strip_whitespace=True)

    ssn: str = Field(..., min_length=1, max_length=20, examples=["1212882659"])
