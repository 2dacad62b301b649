# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest fixtures for database integration tests.

Provides an in-memory SQLite engine and sessions for testing. Set
TEST_DATABASE_URL to run the same tests against PostgreSQL.
"""

import os
from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from registrar.domains.course.service import CourseService
from registrar.infrastructure.database.connection import create_sessionmaker
from registrar.infrastructure.database.models import Course
from registrar.infrastructure.database.models.base import Base
from registrar.infrastructure.database.seeds import seed_database


@pytest.fixture(scope="session")
def db_url() -> str:
    """Get database URL for tests."""
    return os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def db_engine(db_url: str):
    """Create async engine with a fresh schema."""
    if db_url.startswith("sqlite"):
        engine = create_async_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session configured like request sessions."""
    async_session = create_sessionmaker(db_engine)

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session over a database holding the seed templates and students."""
    await seed_database(db_session)
    return db_session


@pytest_asyncio.fixture(scope="function")
async def course_service(seeded_session: AsyncSession) -> CourseService:
    """Course service over the seeded database."""
    return CourseService(db=seeded_session)


@pytest_asyncio.fixture(scope="function")
async def make_course(seeded_session: AsyncSession):
    """Factory inserting a course directly into the store."""

    async def _make_course(
        max_students: int = 2,
        semester: str = "20153",
        template_id: str = "T-514-VEFT",
    ) -> Course:
        course = Course(
            template_id=template_id,
            start_date=datetime(2015, 8, 17),
            end_date=datetime(2015, 11, 8),
            semester=semester,
            max_students=max_students,
        )
        seeded_session.add(course)
        await seeded_session.commit()
        return course

    return _make_course
