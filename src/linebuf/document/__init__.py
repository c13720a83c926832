"""Documents: a text buffer plus file metadata, and flat-bytes file I/O."""

from .io import load_bytes, open_document, save_bytes, save_document
from .metadata import DocumentMetadata, describe_metadata
from .text_document import TextDocument

__all__ = [
    "DocumentMetadata",
    "TextDocument",
    "describe_metadata",
    "load_bytes",
    "open_document",
    "save_bytes",
    "save_document",
]
