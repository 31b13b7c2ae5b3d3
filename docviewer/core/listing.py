"""Directory listing for the viewer's file explorer."""

import datetime
import os
from pathlib import Path
from typing import List

from loguru import logger

from ..schemas.files import FileEntry
from .config import Settings
from .errors import BadRequestError, InternalError, NotFoundError
from .resolver import is_within

DEPENDENCY_DIR = "node_modules"


def resolve_listing_directory(requested_dir: str, settings: Settings) -> Path:
    """Turn the ``dir`` query parameter into a directory path.

    Args:
        requested_dir: Empty, ".", an absolute path or a path relative to the root
        settings: Service settings

    Returns:
        Directory path to list

    Raises:
        BadRequestError: If the directory lies outside a confined root
    """
    root = settings.root_path
    if requested_dir in ("", "."):
        target = root
    elif os.path.isabs(requested_dir):
        target = Path(requested_dir)
    else:
        target = root / requested_dir

    logger.info(f"Requested directory: '{requested_dir}'")
    logger.info(f"Listing files in directory: {target}")

    if settings.confine_to_root and not is_within(target, root):
        logger.warning(f"Refusing to list {target}: outside {root}")
        raise BadRequestError("Path outside root directory is not allowed")
    return target


def _is_excluded_dir(entry_path: Path, settings: Settings) -> bool:
    return entry_path.name in settings.excluded_dirs or DEPENDENCY_DIR in entry_path.parts


def has_relevant_files(directory: Path, settings: Settings) -> bool:
    """Shallow check for at least one allowed file directly inside ``directory``.

    Nested subdirectories are not inspected.
    """
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_dir() and settings.is_allowed_extension(entry.name):
                    return True
    except OSError as e:
        logger.debug(f"Cannot scan {directory}: {e}")
    return False


def list_directory(directory: Path, settings: Settings) -> List[FileEntry]:
    """List the viewer-relevant immediate children of a directory.

    Args:
        directory: Directory to list
        settings: Service settings

    Returns:
        Directories first, then files, each group in case-sensitive name order

    Raises:
        NotFoundError: If the directory does not exist
        BadRequestError: If the path is not a directory
        InternalError: If the directory cannot be read
    """
    try:
        if not directory.exists():
            logger.error(f"Directory not found: {directory}")
            raise NotFoundError("Directory", str(directory))
        if not directory.is_dir():
            logger.error(f"Not a directory: {directory}")
            raise BadRequestError(f"Not a directory: {directory}")
        children = sorted(os.scandir(directory), key=lambda e: e.name)
    except OSError as e:
        logger.error(f"Error reading directory {directory}: {e}")
        raise InternalError(f"Failed to read directory: {e}")

    root = settings.root_path
    items: List[FileEntry] = []
    for entry in children:
        entry_path = directory / entry.name

        if settings.ignore_hidden and entry.name.startswith("."):
            continue

        try:
            is_dir = entry.is_dir()
            file_stat = entry.stat()
        except OSError as e:
            logger.error(f"Error getting file info for {entry_path}: {e}")
            continue

        if is_dir:
            if _is_excluded_dir(entry_path, settings):
                continue
            if not has_relevant_files(entry_path, settings):
                logger.debug(f"Skipping directory without relevant files: {entry_path}")
                continue
        elif not settings.is_allowed_extension(entry.name):
            continue

        if settings.confine_to_root and not is_within(entry_path, root):
            logger.warning(f"Skipping {entry_path}: target outside {root}")
            continue

        items.append(
            FileEntry(
                name=entry.name,
                path=os.path.relpath(entry_path, directory),
                is_dir=is_dir,
                size=file_stat.st_size,
                mod_time=datetime.datetime.fromtimestamp(
                    file_stat.st_mtime, tz=datetime.timezone.utc
                ),
            )
        )

    logger.info(f"Found {len(items)} items in directory {directory}")
    return sorted(items, key=lambda x: (not x.is_dir, x.name))
