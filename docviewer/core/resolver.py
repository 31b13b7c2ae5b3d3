"""Resolution of requested file names to locations under the root.

Clients may send a bare file name, a name plus a directory hint, or a
multi-segment relative path. Resolution builds an ordered list of
candidate locations and takes the first one that exists and is not a
directory.
"""

import os
import stat
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from loguru import logger

from .config import Settings
from .errors import BadRequestError, NotFoundError

FilePredicate = Callable[[Path], bool]

_SEPARATORS = ("/", "\\")


def join_under(root: str | Path, *parts: str) -> Path:
    """Join path parts below ``root`` and normalise the result lexically.

    Leading separators are stripped from every part, so an absolute
    directory hint is still taken relative to ``root``.
    """
    cleaned = [part.lstrip("/\\") for part in parts if part]
    return Path(os.path.normpath(os.path.join(str(root), *cleaned)))


def has_separator(name: str) -> bool:
    return any(sep in name for sep in _SEPARATORS)


def build_candidates(
    root: str | Path,
    requested_name: str,
    directory_hint: str = "",
    subdirectories: Iterable[str] = (),
) -> List[Path]:
    """Build the ordered candidate locations for a requested file.

    Args:
        root: Root of the document tree
        requested_name: File name or relative path sent by the client
        directory_hint: Optional directory the client believes holds the file
        subdirectories: Names of the immediate subdirectories of ``root``

    Returns:
        Candidate paths in priority order
    """
    candidates: List[Path] = []

    if directory_hint:
        candidates.append(join_under(root, directory_hint, requested_name))

    candidates.append(join_under(root, requested_name))

    if has_separator(requested_name):
        # Literal multi-segment retry; last resort after the direct child.
        candidates.append(join_under(root, requested_name))
    else:
        for subdir in sorted(subdirectories):
            candidates.append(join_under(root, subdir, requested_name))

    return candidates


def first_match(candidates: Iterable[Path], is_file: FilePredicate) -> Optional[Path]:
    """Return the first candidate accepted by ``is_file``, or None."""
    for candidate in candidates:
        if is_file(candidate):
            return candidate
    return None


def is_existing_non_directory(path: Path) -> bool:
    """Filesystem predicate: ``path`` exists and is not a directory."""
    try:
        return not stat.S_ISDIR(path.stat().st_mode)
    except (OSError, ValueError):
        return False


def is_within(path: Path, root: Path) -> bool:
    """Check that the canonical form of ``path`` lies inside ``root``.

    Both paths are resolved with symlinks followed before comparing.
    """
    try:
        path.resolve().relative_to(root.resolve())
    except (OSError, ValueError, RuntimeError):
        return False
    return True


def ensure_within_root(path: Path, settings: Settings) -> Path:
    """Reject a resolved path that may leave the document tree.

    Raises:
        BadRequestError: If the path escapes the root
    """
    if settings.confine_to_root:
        if not is_within(path, settings.root_path):
            logger.warning(
                f"Security error: {path} resolves outside {settings.root_path}"
            )
            raise BadRequestError("Invalid file path")
    elif ".." in str(path):
        logger.warning(f"Security error: path contains prohibited '..' sequence: {path}")
        raise BadRequestError("Invalid file path")
    return path


class PathResolver:
    """Locate requested files below the configured root."""

    def __init__(self, settings: Settings, is_file: FilePredicate = is_existing_non_directory):
        self.settings = settings
        self.root = settings.root_path
        self.is_file = is_file

    def subdirectories(self) -> List[str]:
        """Names of the immediate subdirectories of the root."""
        try:
            with os.scandir(self.root) as entries:
                return sorted(entry.name for entry in entries if entry.is_dir())
        except OSError as e:
            logger.error(f"Error reading root directory {self.root}: {e}")
            return []

    def candidates(self, requested_name: str, directory_hint: str = "") -> List[Path]:
        subdirs: List[str] = []
        if not has_separator(requested_name):
            subdirs = self.subdirectories()
        return build_candidates(self.root, requested_name, directory_hint, subdirs)

    def resolve(self, requested_name: str, directory_hint: str = "") -> Path:
        """Resolve a requested file name to a single location.

        Args:
            requested_name: File name or relative path sent by the client
            directory_hint: Optional directory hint, may be empty

        Returns:
            The first existing, non-directory candidate

        Raises:
            BadRequestError: If the name is empty or the match escapes the root
            NotFoundError: If no candidate exists
        """
        if not requested_name:
            raise BadRequestError("Missing file name")

        candidates = self.candidates(requested_name, directory_hint or "")
        resolved = first_match(candidates, self.is_file)
        if resolved is None:
            logger.error(f"Could not resolve file: {requested_name}")
            logger.error(f"Attempted paths: {[str(c) for c in candidates]}")
            raise NotFoundError("File", requested_name)

        logger.info(f"Resolved absolute file path: {resolved}")
        return ensure_within_root(resolved, self.settings)
