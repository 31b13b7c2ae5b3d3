"""File listing schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class FileEntry(BaseModel):
    """One immediate child of a listed directory.

    ``path`` is relative to the directory that was listed, not to the
    service root.
    """

    name: str
    path: str
    is_dir: bool = Field(alias="isDir")
    size: int
    mod_time: datetime = Field(alias="modTime")

    class Config:
        frozen = True
        populate_by_name = True
