"""File metadata captured alongside a document's content."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import ClassVar, List, Optional


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Plain record of where a document came from."""

    file_name: Optional[str] = None
    path: Optional[Path] = None
    size: int = 0
    regular_file: bool = False
    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    accessed: Optional[datetime] = None

    EMPTY: ClassVar["DocumentMetadata"]

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "DocumentMetadata":
        resolved = Path(path)
        info = resolved.stat()
        # st_birthtime only exists on some platforms; st_ctime is the fallback.
        created = getattr(info, "st_birthtime", info.st_ctime)
        return cls(
            file_name=resolved.name,
            path=resolved,
            size=info.st_size,
            regular_file=stat.S_ISREG(info.st_mode),
            created=_timestamp(created),
            modified=_timestamp(info.st_mtime),
            accessed=_timestamp(info.st_atime),
        )

    @property
    def is_empty(self) -> bool:
        return self == DocumentMetadata.EMPTY


DocumentMetadata.EMPTY = DocumentMetadata()


def _format_time(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else "-"


def describe_metadata(metadata: DocumentMetadata) -> List[str]:
    """Render metadata as ``key: value`` lines for display."""

    if metadata.is_empty:
        return ["(no file)"]
    return [
        f"file name: {metadata.file_name}",
        f"path: {metadata.path}",
        f"size: {metadata.size}",
        f"regular file: {metadata.regular_file}",
        f"created: {_format_time(metadata.created)}",
        f"modified: {_format_time(metadata.modified)}",
        f"accessed: {_format_time(metadata.accessed)}",
    ]
