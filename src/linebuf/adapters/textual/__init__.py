"""Textual adapter for the line editor.

Only the controller is imported here so the package works without Textual
installed; the app lives in ``linebuf.adapters.textual.app``.
"""

from .controller import CommandResult, TextualEditorAdapter, ViewerHooks, render_gutter

__all__ = ["CommandResult", "TextualEditorAdapter", "ViewerHooks", "render_gutter"]
