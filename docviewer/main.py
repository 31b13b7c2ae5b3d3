"""Main server application."""

import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from prometheus_client import CollectorRegistry

from docviewer.api import router as api_router
from docviewer.api import router_metrics as api_router_metrics
from docviewer.core.config import Settings
from docviewer.core.errors import ServiceError
from docviewer.core.middleware import (
    PrometheusMiddleware,
    RequestLoggingMiddleware,
    RequestMetrics,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup and a line on shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Current working directory at startup: {os.getcwd()}")
    logger.info(f"Serving documents from: {settings.root_path}")
    logger.info(
        f"Static files directory: {settings.static_dir} "
        f"(absolute: {Path(settings.static_dir).absolute()})"
    )
    logger.info(f"Starting server in {settings.mode_name} mode")

    yield  # Server is running

    logger.info("Server shutting down...")


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Turn a ServiceError into a JSON error response."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to serve with; loaded from the environment when omitted

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Docviewer API",
        description="Read-only Markdown and JSON document tree API",
        version="0.1.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.metrics = RequestMetrics(CollectorRegistry())

    app.add_exception_handler(ServiceError, service_error_handler)

    app.add_middleware(PrometheusMiddleware, metrics=app.state.metrics)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(api_router_metrics)

    static_dir = Path(settings.static_dir).absolute()
    if static_dir.is_dir():
        logger.info(f"Serving static files from directory: {static_dir}")
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.debug(f"Static directory {static_dir} not found, front end not served")

    return app
