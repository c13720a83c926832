"""A text buffer paired with the metadata of the file it was read from."""

from __future__ import annotations

from linebuf.buffer import InvalidArgumentError, TextBuffer

from .metadata import DocumentMetadata


class TextDocument:
    def __init__(self, content: TextBuffer, metadata: DocumentMetadata) -> None:
        if content is None or metadata is None:
            raise InvalidArgumentError(
                "Cannot create a document without content and metadata"
            )
        self._content = content
        self._metadata = metadata

    @property
    def content(self) -> TextBuffer:
        return self._content

    @content.setter
    def content(self, content: TextBuffer) -> None:
        if content is None:
            raise InvalidArgumentError("Cannot set absent content")
        self._content = content

    @property
    def metadata(self) -> DocumentMetadata:
        return self._metadata

    @metadata.setter
    def metadata(self, metadata: DocumentMetadata) -> None:
        if metadata is None:
            raise InvalidArgumentError("Cannot set absent metadata")
        self._metadata = metadata
