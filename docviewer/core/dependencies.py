"""FastAPI dependencies."""

from fastapi import Depends, Request

from .config import Settings
from .resolver import PathResolver


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_resolver(settings: Settings = Depends(get_settings)) -> PathResolver:
    """Build a request-scoped path resolver."""
    return PathResolver(settings)
