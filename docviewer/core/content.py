"""Raw document content for resolved files."""

import json
from pathlib import Path
from typing import Any, Tuple

from loguru import logger

from .config import Settings
from .errors import BadRequestError, InternalError, NotFoundError

CONTENT_TYPES = {
    ".json": "application/json",
    ".md": "text/plain",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def _check_regular_file(path: Path, directory_message: str) -> None:
    try:
        if not path.exists():
            logger.error(f"File not found: {path}")
            raise NotFoundError("File", str(path))
        if path.is_dir():
            logger.error(f"{directory_message}: {path}")
            raise BadRequestError(directory_message)
    except OSError as e:
        logger.error(f"Error accessing file {path}: {e}")
        raise InternalError(f"Error accessing file: {e}")


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {path}: {e}")
        raise InternalError(f"Error reading file: {e}")


def read_content(path: Path, settings: Settings) -> Tuple[bytes, str]:
    """Read a resolved document unmodified.

    Args:
        path: Resolved file location
        settings: Service settings

    Returns:
        The file bytes and the content type derived from the extension

    Raises:
        NotFoundError: If the file does not exist
        BadRequestError: If the path is a directory or the extension is not allowed
        InternalError: If the file cannot be read
    """
    _check_regular_file(path, "Cannot display directory content")

    ext = path.suffix.lower()
    if ext not in settings.allowed_extensions:
        logger.error(f"Unsupported file type: {ext}")
        raise BadRequestError(f"Unsupported file type: {ext}")

    data = _read_bytes(path)
    logger.info(f"Sending file content, size: {len(data)} bytes")
    return data, content_type_for(path)


def _reject_constant(name: str):
    raise ValueError(f"invalid literal {name}")


def load_json_document(path: Path) -> Any:
    """Read and decode a JSON document for querying.

    Raises:
        NotFoundError: If the file does not exist
        BadRequestError: If the path is a directory, not ``.json``, or malformed
        InternalError: If the file cannot be read
    """
    _check_regular_file(path, "Cannot query directory")

    if path.suffix.lower() != ".json":
        logger.error(f"File is not JSON: {path} (ext: {path.suffix})")
        raise BadRequestError("File is not JSON")

    data = _read_bytes(path)
    try:
        # NaN and Infinity are not JSON
        return json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"Error parsing JSON {path}: {e}")
        raise BadRequestError(f"Invalid JSON: {e}")
