"""API router initialization."""

from fastapi import APIRouter

from .content import router as content_router
from .files import router as files_router
from .health import router as health_router
from .metrics import router as metrics_router
from .query import router as query_router

router = APIRouter()

router.include_router(files_router, prefix="/files", tags=["files"])
router.include_router(content_router, prefix="/content", tags=["content"])
router.include_router(query_router, prefix="/query", tags=["query"])
router.include_router(health_router, prefix="/health", tags=["health"])

router_metrics = APIRouter()
router_metrics.include_router(metrics_router, prefix="/metrics", tags=["metrics"])
