# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Development seed data for the registration database.

Course templates and students are reference data the service only reads,
so a fresh development database needs some of each. Seeding is
idempotent: rows whose key already exists are left untouched.
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.infrastructure.database.models import CourseTemplate, Student

logger = logging.getLogger(__name__)

COURSE_TEMPLATES = [
    {"template_id": "T-111-PROG", "name": "Forritun"},
    {"template_id": "T-113-VLN1", "name": "Verklegt námskeið 1"},
    {"template_id": "T-216-GHOH", "name": "Greining og hönnun hugbúnaðar"},
    {"template_id": "T-302-HONN", "name": "Hönnun og smíði hugbúnaðar"},
    {"template_id": "T-409-TSAM", "name": "Tölvusamskipti"},
    {"template_id": "T-514-VEFT", "name": "Vefþjónustur"},
]

STUDENTS = [
    {"name": "Jón Jónsson", "ssn": "1234567890"},
    {"name": "Guðrún Jónsdóttir", "ssn": "9876543210"},
    {"name": "Gunnar Sigurðsson", "ssn": "6543219870"},
    {"name": "Jóna Halldórsdóttir", "ssn": "4567891230"},
    {"name": "Herdís Þorgeirsdóttir", "ssn": "7891234560"},
    {"name": "Dabbi Kóngur", "ssn": "1212882659"},
]


async def seed_course_templates(session: AsyncSession) -> list[CourseTemplate]:
    """Seed default course templates.

    Args:
        session: Database session.

    Returns:
        List of created templates.
    """
    result = await session.execute(select(CourseTemplate.template_id))
    existing = set(result.scalars().all())

    templates = [
        CourseTemplate(**data)
        for data in COURSE_TEMPLATES
        if data["template_id"] not in existing
    ]
    session.add_all(templates)
    await session.flush()

    logger.info("Seeded %d course templates", len(templates))
    return templates


async def seed_students(session: AsyncSession) -> list[Student]:
    """Seed default students.

    Args:
        session: Database session.

    Returns:
        List of created students.
    """
    result = await session.execute(select(Student.ssn))
    existing = set(result.scalars().all())

    students = [Student(**data) for data in STUDENTS if data["ssn"] not in existing]
    session.add_all(students)
    await session.flush()

    logger.info("Seeded %d students", len(students))
    return students


async def seed_database(session: AsyncSession) -> dict[str, list]:
    """Seed all reference data and commit.

    Args:
        session: Database session.

    Returns:
        Dictionary of created templates and students.
    """
    logger.info("Starting database seeding")

    templates = await seed_course_templates(session)
    students = await seed_students(session)

    await session.commit()

    logger.info("Database seeding complete")

    return {
        "course_templates": templates,
        "students": students,
    }


if __name__ == "__main__":
    from registrar.core.config import get_settings
    from registrar.infrastructure.database.connection import (
        close_database,
        create_tables,
        get_session,
        init_database,
    )

    async def main():
        settings = get_settings()
        await init_database(settings)
        try:
            await create_tables()
            async with get_session() as session:
                await seed_database(session)
        finally:
            await close_database()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
