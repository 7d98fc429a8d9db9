# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ASGI entrypoint.

Run with ``schooldesk`` (installed script) or
``uvicorn schooldesk.main:app``.
"""

import uvicorn

from schooldesk.api import create_app
from schooldesk.core.config import get_settings

app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the API settings."""
    settings = get_settings()

    # Workers and reload need an import string instead of the app object
    uvicorn.run(
        "schooldesk.main:app",
        host=settings.api.host,
        port=settings.api.port,
        workers=None if settings.api.reload else settings.api.workers,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
