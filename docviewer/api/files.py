"""Directory listing endpoint."""

from typing import List

from fastapi import APIRouter, Depends, Query
from loguru import logger

from ..core.config import Settings
from ..core.dependencies import get_settings
from ..core.listing import list_directory, resolve_listing_directory
from ..schemas.files import FileEntry

router = APIRouter()


@router.get("", response_model=List[FileEntry])
def list_files(
    directory: str = Query("", alias="dir"),
    settings: Settings = Depends(get_settings),
) -> List[FileEntry]:
    """List the immediate, viewer-relevant children of a directory.

    Args:
        directory: Directory to list, absolute or relative to the root (``dir``)

    Returns:
        Directories first, then Markdown/JSON files
    """
    logger.info(f"Current root directory: {settings.root_path}")
    target_dir = resolve_listing_directory(directory, settings)
    return list_directory(target_dir, settings)
