"""
FastAPI application for the Batteries dashboard backend.

Usage:
    batteries-api --port 8080

or, with an already configured environment:
    uvicorn batteries_api.api.app:create_app --factory --port 8080
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from batteries_api import __version__
from batteries_api.api import routes, stream
from batteries_api.config import Settings, get_settings
from batteries_api.observation.reader import ClusterReader

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, reader: ClusterReader | None = None) -> FastAPI:
    """Build the app; loads cluster credentials when no reader is supplied."""
    opts = settings or get_settings()
    if reader is None:
        reader = ClusterReader.from_kubeconfig(
            kubeconfig=str(opts.kubeconfig) if opts.kubeconfig else None,
            context=opts.context,
            request_timeout=opts.request_timeout_seconds,
        )

    app = FastAPI(
        title="Batteries API",
        description="Cluster status aggregation for the Batteries dashboard",
        version=__version__,
    )
    app.state.settings = opts
    app.state.reader = reader

    # Any origin, method and header; credentials allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes.router)
    app.include_router(stream.router)
    logger.debug("Application created (push interval %.1fs)", opts.push_interval_seconds)
    return app
