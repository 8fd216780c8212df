"""
Main entrypoint for the Certificate Registry API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory registry, registers the error handlers and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn certificate_api.app.main:app --reload

The v1 routes are mounted twice: at the root, where existing
clients expect ``/certificates/{id}``, and under ``/api/v1``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.registry import Registry, build_registry


def create_app(registry: Optional[Registry] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    registry : Optional[Registry]
        Registry to serve.  When omitted a new one is built and seeded
        with the users from ``settings.users_file`` (or the demo users).

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    # Logging first so registry seeding can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.registry = registry if registry is not None else build_registry(settings.users_file)

    register_error_handlers(app)

    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
