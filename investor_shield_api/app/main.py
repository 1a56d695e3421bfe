"""
Main entrypoint for the Investor Shield API.

This module assembles the FastAPI application: it sets up logging,
builds the in‑memory record store and includes the versioned routers.
``create_app`` returns a configured application and is called once at
import time to expose ``app`` for ASGI servers, e.g.::

    uvicorn investor_shield_api.app.main:app --reload

The store lives on ``app.state.store``.  Tests pass their own store to
``create_app`` to get an isolated instance.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import RecordStore, build_store


logger = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Store to serve.  When omitted a new store is built and, if
        ``settings.seed_fixtures`` is set, seeded with the fixtures.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that store seeding below is logged.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else build_store(seed=settings.seed_fixtures)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")
    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


app = create_app()
