# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for database models.

Tests table names, columns and foreign keys of the registration schema.
"""

from registrar.infrastructure.database.models import (
    Base,
    Course,
    CourseRegistration,
    CourseTemplate,
    Student,
    WaitingListEntry,
)


class TestBase:
    """Test base model functionality."""

    def test_base_inherits_declarative_base(self):
        """Verify Base is a declarative base."""
        assert hasattr(Base, "metadata")
        assert hasattr(Base, "registry")

    def test_all_tables_registered(self):
        """Verify the five registration tables are in the metadata."""
        assert set(Base.metadata.tables) == {
            "course_templates",
            "courses",
            "students",
            "course_registrations",
            "waiting_list_entries",
        }


class TestCourseModels:
    """Test course related models."""

    def test_course_template_model(self):
        """Verify CourseTemplate is keyed by its code."""
        table = CourseTemplate.__table__

        assert CourseTemplate.__tablename__ == "course_templates"
        assert [c.name for c in table.primary_key.columns] == ["template_id"]
        assert "name" in table.columns

    def test_course_model(self):
        """Verify Course has required attributes."""
        table = Course.__table__

        assert Course.__tablename__ == "courses"
        for column in ("id", "template_id", "start_date", "end_date", "semester", "max_students"):
            assert column in table.columns
        fk = next(iter(table.columns["template_id"].foreign_keys))
        assert fk.target_fullname == "course_templates.template_id"

    def test_course_registration_model(self):
        """Verify CourseRegistration references course and student."""
        table = CourseRegistration.__table__

        assert CourseRegistration.__tablename__ == "course_registrations"
        assert "active" in table.columns
        targets = {fk.target_fullname for fk in table.foreign_keys}
        assert targets == {"courses.id", "students.id"}

    def test_course_registration_defaults_active(self):
        """Verify active defaults to True on insert."""
        column = CourseRegistration.__table__.columns["active"]

        assert column.default.arg is True
        assert column.nullable is False

    def test_waiting_list_entry_model(self):
        """Verify WaitingListEntry references course and student."""
        table = WaitingListEntry.__table__

        assert WaitingListEntry.__tablename__ == "waiting_list_entries"
        targets = {fk.target_fullname for fk in table.foreign_keys}
        assert targets == {"courses.id", "students.id"}


class TestStudentModel:
    """Test student model."""

    def test_student_ssn_unique(self):
        """Verify SSN is unique."""
        table = Student.__table__

        assert Student.__tablename__ == "students"
        assert table.columns["ssn"].unique is True
        assert "name" in table.columns

    def test_repr(self):
        """Verify repr includes the SSN."""
        student = Student(id=1, name="Jón Jónsson", ssn="1234567890")

        assert repr(student) == "<Student 1 1234567890>"
