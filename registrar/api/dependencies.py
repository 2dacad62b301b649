# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints:
- Database lifecycle (init at startup, close at shutdown)
- Request-scoped database sessions
- Course service instances

Example:
    @router.get("/courses")
    async def list_courses(
        service: CourseService = Depends(get_course_service),
    ):
        ...
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core.config import Settings, get_settings
from registrar.domains.course.service import CourseService
from registrar.infrastructure.database.connection import (
    close_database,
    create_tables,
    get_session,
    init_database,
)
from registrar.infrastructure.database.seeds import seed_database

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Initialize the database connection and optional bootstrap steps."""
    settings = get_settings()

    await init_database(settings)

    if settings.database.create_tables:
        await create_tables()
        logger.info("Database tables created")

    if settings.database.seed:
        async with get_session() as session:
            await seed_database(session)


async def close_db() -> None:
    """Close the database connection."""
    await close_database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a request-scoped database session.

    Yields:
        AsyncSession committed after the request, rolled back on error.
    """
    async with get_session() as session:
        yield session


def get_course_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CourseService:
    """Get course service instance.

    Args:
        db: Request-scoped database session.
        settings: Application settings.

    Returns:
        Configured CourseService instance.
    """
    return CourseService(
        db=db,
        default_semester=settings.registration.default_semester,
    )
