# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API endpoints.

Course endpoints:
- GET / - List courses of a semester
- POST / - Create a course from a template
- GET /{course_id} - Get course details with roster
- PUT /{course_id} - Update course dates
- DELETE /{course_id} - Delete course and its registrations

Enrollment endpoints:
- GET /{course_id}/students - List actively enrolled students
- POST /{course_id}/students - Enroll a student
- DELETE /{course_id}/students/{ssn} - Withdraw a student

Waiting list endpoints:
- GET /{course_id}/waitinglist - List waiting students
- POST /{course_id}/waitinglist - Put a student on the waiting list
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from registrar.api.dependencies import get_course_service
from registrar.domains.course.service import (
    BadRequestError,
    ConflictError,
    CourseService,
    NotFoundError,
    PreconditionFailedError,
    ServerError,
)
from registrar.models.course import (
    CourseCreateRequest,
    CourseDetail,
    CourseSummary,
    CourseUpdateRequest,
    StudentEnrollRequest,
    StudentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[CourseSummary],
    summary="List courses",
    description="List courses taught in a semester. Defaults to the current semester.",
)
async def list_courses(
    semester: Annotated[str | None, Query(description="Semester code, e.g. 20153")] = None,
    service: CourseService = Depends(get_course_service),
) -> list[CourseSummary]:
    """List courses of a semester.

    Args:
        semester: Optional semester code.
        service: Course service.

    Returns:
        Course summaries.
    """
    return await service.list_courses(semester)


@router.post(
    "",
    response_model=CourseSummary,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    description="Create a course from an existing course template.",
)
async def add_course(
    data: CourseCreateRequest,
    service: CourseService = Depends(get_course_service),
) -> CourseSummary:
    """Create a new course.

    Raises:
        HTTPException: If template not found or input is invalid.
    """
    logger.info("Creating course: template=%s, semester=%s", data.template_id, data.semester)

    try:
        return await service.add_course(data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except BadRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ServerError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.get(
    "/{course_id}",
    response_model=CourseDetail,
    summary="Get course",
    description="Get course details with every student registered in it.",
)
async def get_course(
    course_id: int,
    service: CourseService = Depends(get_course_service),
) -> CourseDetail:
    """Get course details.

    Raises:
        HTTPException: If course not found.
    """
    try:
        return await service.get_course(course_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )


@router.put(
    "/{course_id}",
    response_model=CourseSummary,
    summary="Update course",
    description="Replace the start and end dates of a course.",
)
async def update_course(
    course_id: int,
    data: CourseUpdateRequest,
    service: CourseService = Depends(get_course_service),
) -> CourseSummary:
    """Update course dates.

    Raises:
        HTTPException: If course not found or its template is missing.
    """
    logger.info("Updating course: %s", course_id)

    try:
        return await service.update_course(course_id, data)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )
    except ServerError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete course",
    description="Delete a course together with its registrations.",
)
async def delete_course(
    course_id: int,
    service: CourseService = Depends(get_course_service),
) -> None:
    """Delete a course.

    Raises:
        HTTPException: If course not found.
    """
    logger.info("Deleting course: %s", course_id)

    try:
        await service.delete_course(course_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


# ============================================================================
# Enrollment Endpoints
# ============================================================================


@router.get(
    "/{course_id}/students",
    response_model=list[StudentResponse],
    summary="List enrolled students",
    description="List students with an active registration in the course.",
)
async def get_students_in_course(
    course_id: int,
    service: CourseService = Depends(get_course_service),
) -> list[StudentResponse]:
    """List actively enrolled students.

    Raises:
        HTTPException: If course not found.
    """
    try:
        return await service.get_students_in_course(course_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )


@router.post(
    "/{course_id}/students",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Enroll student",
    description="Enroll a student in a course that has a free seat.",
)
async def add_student_to_course(
    course_id: int,
    data: StudentEnrollRequest,
    service: CourseService = Depends(get_course_service),
) -> StudentResponse:
    """Enroll a student.

    Raises:
        HTTPException: If course/student not found, course full or
            student already enrolled.
    """
    logger.info("Enrolling student: ssn=%s, course=%s", data.ssn, course_id)

    try:
        return await service.add_student_to_course(course_id, data.ssn)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PreconditionFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_412_PRECONDITION_FAILED,
            detail=str(e),
        )


@router.delete(
    "/{course_id}/students/{ssn}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Withdraw student",
    description="Deactivate a student's registration in the course.",
)
async def remove_student_from_course(
    course_id: int,
    ssn: str,
    service: CourseService = Depends(get_course_service),
) -> None:
    """Withdraw a student.

    Raises:
        HTTPException: If course/student not found or student not enrolled.
    """
    logger.info("Withdrawing student: ssn=%s, course=%s", ssn, course_id)

    try:
        await service.remove_student_from_course(course_id, ssn)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PreconditionFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_412_PRECONDITION_FAILED,
            detail=str(e),
        )


# ============================================================================
# Waiting List Endpoints
# ============================================================================


@router.get(
    "/{course_id}/waitinglist",
    response_model=list[StudentResponse],
    summary="Get waiting list",
    description="List students waiting for a seat in the course.",
)
async def get_waiting_list(
    course_id: int,
    service: CourseService = Depends(get_course_service),
) -> list[StudentResponse]:
    """List the waiting list.

    Raises:
        HTTPException: If course not found.
    """
    try:
        return await service.get_waiting_list(course_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )


@router.post(
    "/{course_id}/waitinglist",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join waiting list",
    description="Put a student on the waiting list of a course.",
)
async def add_student_to_waiting_list(
    course_id: int,
    data: StudentEnrollRequest,
    service: CourseService = Depends(get_course_service),
) -> StudentResponse:
    """Put a student on the waiting list.

    Raises:
        HTTPException: If course/student not found, or student already
            enrolled or waiting.
    """
    logger.info("Adding to waiting list: ssn=%s, course=%s", data.ssn, course_id)

    try:
        return await service.add_student_to_waiting_list(course_id, data.ssn)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
