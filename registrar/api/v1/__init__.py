# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Modules:
    courses: Course, enrollment and waiting list endpoints.
"""

from fastapi import APIRouter

from registrar.api.v1 import courses

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(courses.router, prefix="/courses", tags=["Courses"])

__all__ = ["router"]
