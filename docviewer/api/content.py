"""Raw document content endpoint."""

from fastapi import APIRouter, Depends, Query, Response
from loguru import logger

from ..core.config import Settings
from ..core.content import read_content
from ..core.dependencies import get_resolver, get_settings
from ..core.resolver import PathResolver

router = APIRouter()


@router.get("/{file_name:path}")
def get_file_content(
    file_name: str,
    directory: str = Query("", alias="dir"),
    resolver: PathResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Return a Markdown or JSON file exactly as stored.

    Args:
        file_name: File name or path relative to the root
        directory: Optional directory the file is expected in
    """
    logger.info(f"Getting content for file: {file_name} in directory: '{directory}'")
    file_path = resolver.resolve(file_name, directory)
    data, content_type = read_content(file_path, settings)
    return Response(content=data, media_type=content_type)
