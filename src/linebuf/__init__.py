"""Byte-exact line buffer with line-break detection and a range-scoped line editor."""

__all__ = [
    "adapters",
    "buffer",
    "document",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
