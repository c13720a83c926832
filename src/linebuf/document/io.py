"""Reading and writing documents as flat bytes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from linebuf.buffer import InvalidArgumentError, LineBreakKind, TextBuffer
from linebuf.runtime import telemetry

from .metadata import DocumentMetadata
from .text_document import TextDocument

LOGGER_NAME = "linebuf.document"

PathLike = str | os.PathLike[str]


def load_bytes(path: Optional[PathLike]) -> Optional[bytes]:
    """Return the file's bytes, or ``None`` when it cannot be read."""

    if path is None or not str(path):
        raise InvalidArgumentError("Path cannot be absent or empty")
    with telemetry.span(
        "document::load_bytes",
        logger_name=LOGGER_NAME,
        metadata={"path": str(path)},
    ) as handle:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            handle.add_metadata("error", exc.__class__.__name__)
            telemetry.record_event(
                "document.load_failed",
                level="error",
                data={"path": str(path), "reason": str(exc)},
                logger_name=LOGGER_NAME,
            )
            return None
        handle.add_metadata("size", len(data))
        return data


def save_bytes(data: bytes, path: PathLike) -> None:
    if path is None or not str(path):
        raise InvalidArgumentError("Path cannot be absent or empty")
    with telemetry.span(
        "document::save_bytes",
        logger_name=LOGGER_NAME,
        metadata={"path": str(path), "size": len(data)},
    ):
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            telemetry.record_event(
                "document.save_failed",
                level="error",
                data={"path": str(path), "reason": str(exc)},
                logger_name=LOGGER_NAME,
            )
            raise


def open_document(
    path: Optional[PathLike] = None,
    *,
    default_line_break: Optional[LineBreakKind] = None,
) -> TextDocument:
    """Build a document from ``path``; a missing or unreadable file opens empty."""

    data = load_bytes(path) if path is not None else None
    if data is None:
        content = TextBuffer(b"", default_line_break=default_line_break)
        return TextDocument(content, DocumentMetadata.EMPTY)

    content = TextBuffer(data, default_line_break=default_line_break)
    telemetry.record_event(
        "document.opened",
        level="debug",
        data={
            "path": str(path),
            "lines": content.line_count,
            "line_break": content.line_break.name,
        },
        logger_name=LOGGER_NAME,
    )
    return TextDocument(content, DocumentMetadata.from_path(path))


def save_document(document: TextDocument, path: Optional[PathLike] = None) -> Path:
    """Write the document's bytes to ``path`` or back to where it came from."""

    target = path if path is not None else document.metadata.path
    if target is None:
        raise InvalidArgumentError("Document has no path to save to")
    save_bytes(document.content.to_bytes(), target)
    document.content.dirty = False
    document.metadata = DocumentMetadata.from_path(target)
    return Path(target)
