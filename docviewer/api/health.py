"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..core.config import Settings
from ..core.dependencies import get_settings

router = APIRouter()


@router.get("")
async def health(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint."""
    return {
        "status": "ok",
        "mode": settings.mode_name,
        "root": str(settings.root_path),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
