# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course service for course offerings, enrollment and waiting lists.

This module provides the CourseService class for:
- Course listing, retrieval, creation, update and deletion
- Student enrollment and withdrawal with seat cap enforcement
- Waiting list management

Capacity and duplicate checks are plain reads followed by a write in the
same session. They are not atomic with that write, so two concurrent
calls for the same course can both pass a check.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.infrastructure.database.models import (
    Course,
    CourseRegistration,
    CourseTemplate,
    Student,
    WaitingListEntry,
)
from registrar.models.course import (
    CourseCreateRequest,
    CourseDetail,
    CourseSummary,
    CourseUpdateRequest,
    StudentResponse,
)
from registrar.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SEMESTER = "20153"


class CourseServiceError(Exception):
    """Base exception for course service errors."""

    pass


class NotFoundError(CourseServiceError):
    """Raised when a referenced course, template, student or row is missing."""

    pass


class PreconditionFailedError(CourseServiceError):
    """Raised when the current enrollment state forbids the operation."""

    pass


class ConflictError(CourseServiceError):
    """Raised when the requested state already exists."""

    pass


class BadRequestError(CourseServiceError):
    """Raised when creation input is malformed."""

    pass


class ServerError(CourseServiceError):
    """Raised when the store is found in an inconsistent state."""

    pass


class CourseNotFoundError(NotFoundError):
    """Raised when course is not found."""

    pass


class CourseTemplateNotFoundError(NotFoundError):
    """Raised when course template is not found."""

    pass


class StudentNotFoundError(NotFoundError):
    """Raised when student is not found."""

    pass


class RegistrationNotFoundError(NotFoundError):
    """Raised when a registration row disappears while a course is deleted."""

    pass


class CourseFullError(PreconditionFailedError):
    """Raised when a course has no free seats."""

    pass


class AlreadyEnrolledError(PreconditionFailedError):
    """Raised when student is already actively enrolled in the course."""

    pass


class NotEnrolledError(PreconditionFailedError):
    """Raised when student has no active registration in the course."""

    pass


class AlreadyInCourseError(ConflictError):
    """Raised when an enrolled student is put on the course's waiting list."""

    pass


class AlreadyOnWaitingListError(ConflictError):
    """Raised when student is already on the course's waiting list."""

    pass


class InvalidCourseError(BadRequestError):
    """Raised when course creation data is inconsistent."""

    pass


class DataIntegrityError(ServerError):
    """Raised when a row that must exist cannot be read back."""

    pass


class CourseService:
    """Service for managing courses, enrollment and waiting lists.

    Listings, details and update results count every registration row
    of a course. Seat cap enforcement and the result of course creation
    count only active registrations.

    Attributes:
        db: Async database session.
        default_semester: Semester listed when none is requested.
    """

    def __init__(self, db: AsyncSession, default_semester: str = DEFAULT_SEMESTER) -> None:
        """Initialize course service.

        Args:
            db: Async database session for the registration database.
            default_semester: Semester listed when none is requested.
        """
        self.db = db
        self.default_semester = default_semester

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_courses(self, semester: str | None = None) -> list[CourseSummary]:
        """List courses taught in a semester.

        Args:
            semester: Semester code. Empty or None means the default semester.

        Returns:
            Course summaries, each counting all registrations of the course.
        """
        if not semester:
            semester = self.default_semester

        registration_count = (
            select(func.count(CourseRegistration.id))
            .where(CourseRegistration.course_id == Course.id)
            .correlate(Course)
            .scalar_subquery()
        )
        query = (
            select(Course, CourseTemplate.name, registration_count)
            .join(CourseTemplate, Course.template_id == CourseTemplate.template_id)
            .where(Course.semester == semester)
            .order_by(Course.id)
        )
        result = await self.db.execute(query)

        return [
            self._to_summary(course, name, count or 0)
            for course, name, count in result.all()
        ]

    async def get_course(self, course_id: int) -> CourseDetail:
        """Get a course with every student ever registered in it.

        Args:
            course_id: Course identifier.

        Returns:
            Course details with roster.

        Raises:
            CourseNotFoundError: If course not found.
        """
        query = (
            select(Course, CourseTemplate.name)
            .join(CourseTemplate, Course.template_id == CourseTemplate.template_id)
            .where(Course.id == course_id)
        )
        result = await self.db.execute(query)
        row = result.one_or_none()

        if row is None:
            raise CourseNotFoundError(f"Course {course_id} not found")

        course, template_name = row
        students = await self._get_roster(course_id, active_only=False)

        return CourseDetail(
            id=course.id,
            start_date=course.start_date,
            end_date=course.end_date,
            name=template_name,
            semester=course.semester,
            student_count=len(students),
            students=students,
        )

    async def get_students_in_course(self, course_id: int) -> list[StudentResponse]:
        """List students actively enrolled in a course.

        Args:
            course_id: Course identifier.

        Returns:
            Students with an active registration.

        Raises:
            CourseNotFoundError: If course not found.
        """
        await self._get_course(course_id)
        return await self._get_roster(course_id, active_only=True)

    async def get_waiting_list(self, course_id: int) -> list[StudentResponse]:
        """List students on a course's waiting list in insertion order.

        Args:
            course_id: Course identifier.

        Returns:
            Waiting students.

        Raises:
            CourseNotFoundError: If course not found.
        """
        await self._get_course(course_id)

        query = (
            select(Student)
            .join(WaitingListEntry, WaitingListEntry.student_id == Student.id)
            .where(WaitingListEntry.course_id == course_id)
            .order_by(WaitingListEntry.id)
        )
        result = await self.db.execute(query)

        return [self._to_student(s) for s in result.scalars().all()]

    # ------------------------------------------------------------------
    # Course mutations
    # ------------------------------------------------------------------

    async def update_course(
        self,
        course_id: int,
        request: CourseUpdateRequest,
    ) -> CourseSummary:
        """Replace a course's start and end dates.

        Args:
            course_id: Course identifier.
            request: New dates.

        Returns:
            Updated course, counting all of its registrations.

        Raises:
            CourseNotFoundError: If course not found.
            DataIntegrityError: If the course's template cannot be resolved.
        """
        course = await self._get_course(course_id)

        course.start_date = request.start_date
        course.end_date = request.end_date

        await self.db.commit()

        template = await self._find_template(course.template_id)
        if template is None:
            raise DataIntegrityError(
                f"Template {course.template_id} of course {course_id} not found"
            )

        student_count = await self._count_registrations(course.id)

        logger.info("course_updated", course_id=course_id)

        return self._to_summary(course, template.name, student_count)

    async def delete_course(self, course_id: int) -> None:
        """Delete a course together with its registrations and waiting list.

        Args:
            course_id: Course identifier.

        Raises:
            CourseNotFoundError: If course not found.
            RegistrationNotFoundError: If a registration vanishes mid-delete.
        """
        course = await self._get_course(course_id)

        id_query = select(CourseRegistration.id).where(
            CourseRegistration.course_id == course_id
        )
        result = await self.db.execute(id_query)
        registration_ids = result.scalars().all()

        for registration_id in registration_ids:
            registration = await self.db.get(CourseRegistration, registration_id)
            if registration is None:
                raise RegistrationNotFoundError(
                    f"Registration {registration_id} of course {course_id} not found"
                )
            await self.db.delete(registration)

        entry_query = select(WaitingListEntry).where(
            WaitingListEntry.course_id == course_id
        )
        result = await self.db.execute(entry_query)
        waiting_entries = result.scalars().all()
        for entry in waiting_entries:
            await self.db.delete(entry)

        # Child rows must reach the store before the course row
        await self.db.flush()
        await self.db.delete(course)
        await self.db.commit()

        logger.info(
            "course_deleted",
            course_id=course_id,
            registrations=len(registration_ids),
            waiting_list_entries=len(waiting_entries),
        )

    async def add_course(self, request: CourseCreateRequest) -> CourseSummary:
        """Create a course from an existing template.

        Args:
            request: Course creation data.

        Returns:
            Created course, counting its active registrations.

        Raises:
            CourseTemplateNotFoundError: If template not found.
            InvalidCourseError: If the dates or seat cap are invalid.
            DataIntegrityError: If the new course cannot be read back.
        """
        template = await self._find_template(request.template_id)
        if template is None:
            raise CourseTemplateNotFoundError(
                f"Course template {request.template_id} not found"
            )

        if request.end_date < request.start_date:
            raise InvalidCourseError("Course end date is before its start date")
        if request.max_students < 0:
            raise InvalidCourseError("Maximum number of students cannot be negative")

        course = Course(
            template_id=request.template_id,
            start_date=request.start_date,
            end_date=request.end_date,
            semester=request.semester,
            max_students=request.max_students,
        )

        self.db.add(course)
        await self.db.commit()

        created = await self._find_course(course.id)
        if created is None:
            raise DataIntegrityError(f"Created course {course.id} could not be read back")

        student_count = await self._count_registrations(created.id, active_only=True)

        logger.info(
            "course_created",
            course_id=created.id,
            template_id=request.template_id,
            semester=request.semester,
        )

        return CourseSummary(
            id=created.id,
            start_date=request.start_date,
            end_date=request.end_date,
            name=template.name,
            semester=request.semester,
            student_count=student_count,
        )

    # ------------------------------------------------------------------
    # Enrollment
    # ------------------------------------------------------------------

    async def add_student_to_course(self, course_id: int, ssn: str) -> StudentResponse:
        """Enroll a student in a course.

        A waiting list entry of the student for this course is consumed.
        A full course does not put the student on the waiting list.

        Args:
            course_id: Course identifier.
            ssn: SSN of the student.

        Returns:
            The enrolled student.

        Raises:
            StudentNotFoundError: If student not found.
            CourseNotFoundError: If course not found.
            CourseFullError: If active registrations reached the seat cap.
            AlreadyEnrolledError: If student is already actively enrolled.
        """
        student = await self._get_student(ssn)
        course = await self._get_course(course_id)

        active_count = await self._count_registrations(course_id, active_only=True)
        if active_count >= course.max_students:
            raise CourseFullError(
                f"Course {course_id} is full ({active_count}/{course.max_students})"
            )

        if await self._find_active_registration(course_id, student.id) is not None:
            raise AlreadyEnrolledError(
                f"Student {ssn} is already enrolled in course {course_id}"
            )

        waiting_entry = await self._find_waiting_entry(course_id, student.id)
        if waiting_entry is not None:
            await self.db.delete(waiting_entry)
            await self.db.commit()

        registration = CourseRegistration(
            course_id=course_id,
            student_id=student.id,
            active=True,
        )
        self.db.add(registration)
        await self.db.commit()

        logger.info(
            "student_enrolled",
            course_id=course_id,
            ssn=ssn,
            from_waiting_list=waiting_entry is not None,
        )

        return self._to_student(student)

    async def remove_student_from_course(self, course_id: int, ssn: str) -> None:
        """Withdraw a student from a course.

        The registration is deactivated, not deleted. The freed seat is
        not offered to the waiting list.

        Args:
            course_id: Course identifier.
            ssn: SSN of the student.

        Raises:
            StudentNotFoundError: If student not found.
            CourseNotFoundError: If course not found.
            NotEnrolledError: If student has no active registration.
        """
        student = await self._get_student(ssn)
        await self._get_course(course_id)

        registration = await self._find_active_registration(course_id, student.id)
        if registration is None:
            raise NotEnrolledError(f"Student {ssn} is not enrolled in course {course_id}")

        registration.active = False
        await self.db.commit()

        logger.info("student_withdrawn", course_id=course_id, ssn=ssn)

    async def add_student_to_waiting_list(self, course_id: int, ssn: str) -> StudentResponse:
        """Put a student on a course's waiting list.

        Args:
            course_id: Course identifier.
            ssn: SSN of the student.

        Returns:
            The waiting student.

        Raises:
            CourseNotFoundError: If course not found.
            StudentNotFoundError: If student not found.
            AlreadyInCourseError: If student is actively enrolled.
            AlreadyOnWaitingListError: If student is already waiting.
        """
        await self._get_course(course_id)
        student = await self._get_student(ssn)

        if await self._find_active_registration(course_id, student.id) is not None:
            raise AlreadyInCourseError(
                f"Student {ssn} is already enrolled in course {course_id}"
            )

        if await self._find_waiting_entry(course_id, student.id) is not None:
            raise AlreadyOnWaitingListError(
                f"Student {ssn} is already on the waiting list of course {course_id}"
            )

        self.db.add(WaitingListEntry(course_id=course_id, student_id=student.id))
        await self.db.commit()

        logger.info("student_waiting", course_id=course_id, ssn=ssn)

        return self._to_student(student)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def _find_course(self, course_id: int | None) -> Course | None:
        query = select(Course).where(Course.id == course_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _get_course(self, course_id: int) -> Course:
        """Get course by ID.

        Raises:
            CourseNotFoundError: If not found.
        """
        course = await self._find_course(course_id)
        if course is None:
            raise CourseNotFoundError(f"Course {course_id} not found")
        return course

    async def _find_template(self, template_id: str) -> CourseTemplate | None:
        query = select(CourseTemplate).where(CourseTemplate.template_id == template_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _get_student(self, ssn: str) -> Student:
        """Get student by SSN.

        Raises:
            StudentNotFoundError: If not found.
        """
        query = select(Student).where(Student.ssn == ssn)
        result = await self.db.execute(query)
        student = result.scalar_one_or_none()

        if student is None:
            raise StudentNotFoundError(f"Student {ssn} not found")

        return student

    async def _find_active_registration(
        self,
        course_id: int,
        student_id: int,
    ) -> CourseRegistration | None:
        query = select(CourseRegistration).where(
            CourseRegistration.course_id == course_id,
            CourseRegistration.student_id == student_id,
            CourseRegistration.active.is_(True),
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _find_waiting_entry(
        self,
        course_id: int,
        student_id: int,
    ) -> WaitingListEntry | None:
        query = select(WaitingListEntry).where(
            WaitingListEntry.course_id == course_id,
            WaitingListEntry.student_id == student_id,
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _count_registrations(self, course_id: int, active_only: bool = False) -> int:
        """Count registration rows of a course.

        Args:
            course_id: Course identifier.
            active_only: Count only active registrations.

        Returns:
            Number of matching registrations.
        """
        query = select(func.count()).select_from(CourseRegistration).where(
            CourseRegistration.course_id == course_id,
        )
        if active_only:
            query = query.where(CourseRegistration.active.is_(True))

        result = await self.db.execute(query)
        return result.scalar() or 0

    async def _get_roster(self, course_id: int, active_only: bool) -> list[StudentResponse]:
        query = (
            select(Student)
            .join(CourseRegistration, CourseRegistration.student_id == Student.id)
            .where(CourseRegistration.course_id == course_id)
            .order_by(CourseRegistration.id)
        )
        if active_only:
            query = query.where(CourseRegistration.active.is_(True))

        result = await self.db.execute(query)
        return [self._to_student(s) for s in result.scalars().all()]

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _to_summary(self, course: Course, name: str, student_count: int) -> CourseSummary:
        return CourseSummary(
            id=course.id,
            start_date=course.start_date,
            end_date=course.end_date,
            name=name,
            semester=course.semester,
            student_count=student_count,
        )

    def _to_student(self, student: Student) -> StudentResponse:
        return StudentResponse(name=student.name, ssn=student.ssn)
