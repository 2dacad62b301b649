# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course ORM models.

Tables:
- course_templates: reusable course definitions (read-only here)
- courses: a template offered in a given semester with a seat cap
- course_registrations: student enrollments, deactivated on withdrawal
- waiting_list_entries: students waiting for a seat in a course
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registrar.infrastructure.database.models.base import Base


class CourseTemplate(Base):
    """Reusable course definition.

    Attributes:
        template_id: Template code, e.g. "T-514-VEFT".
        name: Display name, e.g. "Vefþjónustur".
    """

    __tablename__ = "course_templates"

    template_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<CourseTemplate {self.template_id}>"


class Course(Base):
    """A course template taught in a given semester.

    Attributes:
        id: Generated integer primary key.
        template_id: Code of the template this course instantiates.
        start_date: First day of teaching.
        end_date: Last day of teaching.
        semester: Year plus term digit, e.g. "20151" (spring),
            "20152" (summer), "20153" (fall).
        max_students: Maximum number of active registrations.
    """

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    template_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("course_templates.template_id"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    semester: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    max_students: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Course {self.id} {self.template_id} {self.semester}>"


class CourseRegistration(Base):
    """Enrollment of a student in a course.

    Withdrawal clears the active flag; the row is kept as history.

    Attributes:
        id: Generated integer primary key.
        course_id: Course the student is registered in.
        student_id: Registered student.
        active: Whether the registration is a current enrollment.
    """

    __tablename__ = "course_registrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<CourseRegistration {self.course_id}:{self.student_id} active={self.active}>"


class WaitingListEntry(Base):
    """A student waiting for a seat in a course.

    Entries carry no priority; insertion order (id) is the only order.

    Attributes:
        id: Generated integer primary key.
        course_id: Course the student waits for.
        student_id: Waiting student.
    """

    __tablename__ = "waiting_list_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<WaitingListEntry {self.course_id}:{self.student_id}>"
