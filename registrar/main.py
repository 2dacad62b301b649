# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ASGI entry point.

Usage:
    uvicorn registrar.main:app
    registrar-api
"""

import uvicorn

from registrar.api import create_app
from registrar.core.config import get_settings

app = create_app()


def run() -> None:
    """Serve the API with Uvicorn using the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "registrar.main:app",
        host=settings.api.host,
        port=settings.api.port,
        workers=settings.api.workers,
        reload=settings.api.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
