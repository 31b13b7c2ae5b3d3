"""Core configuration settings for the viewer service."""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ALLOWED_EXTENSIONS = [".md", ".json"]
DEFAULT_EXCLUDED_DIRS = ["node_modules", "build", "dist"]


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Built once per application and never mutated afterwards; handlers
    receive it through :func:`docviewer.core.dependencies.get_settings`.
    """

    # API settings
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: Union[List[str], str] = ["*"]

    # Document tree settings
    root_directory: str = Field(default_factory=lambda: str(Path.cwd()))
    allowed_extensions: Union[List[str], str] = DEFAULT_ALLOWED_EXTENSIONS
    excluded_dirs: Union[List[str], str] = DEFAULT_EXCLUDED_DIRS
    ignore_hidden: bool = True
    read_only: bool = True
    confine_to_root: bool = True

    # Front end build served at "/" when present
    static_dir: str = "./frontend/build"

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def parse_allowed_extensions(cls, value):
        """Parse the allowed_extensions setting.

        Accepts a list or a comma-separated string such as ``"md, .json"``.
        Every extension is lower-cased and given a leading dot.
        """
        if value is None:
            return list(DEFAULT_ALLOWED_EXTENSIONS)
        if isinstance(value, str):
            value = _split_csv(value)

        extensions = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in extensions:
                extensions.append(ext)

        if not extensions:
            logger.error("allowed_extensions resolved to an empty list")
            raise ValueError("At least one allowed extension is required")
        return extensions

    @field_validator("excluded_dirs", "cors_origins", mode="before")
    @classmethod
    def parse_csv_list(cls, value):
        """Parse comma-separated list settings coming from the environment."""
        if value is None:
            return []
        if isinstance(value, str):
            return _split_csv(value)
        return value

    @property
    def root_path(self) -> Path:
        """Absolute (not symlink-resolved) root of the document tree."""
        return Path(self.root_directory).expanduser().absolute()

    @property
    def mode_name(self) -> str:
        return "read-only" if self.read_only else "read-write"

    def is_allowed_extension(self, name: str) -> bool:
        """Check whether a file name carries one of the allowed extensions."""
        return Path(name).suffix.lower() in self.allowed_extensions

    class Config:
        env_prefix = "DOCVIEWER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True
