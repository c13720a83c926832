"""Executable Textual app that shows and edits a document line by line."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the viewer is run
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use linebuf.adapters.textual.app"
    ) from exc

from linebuf.document import TextDocument, open_document, save_document
from linebuf.editor import LineEditor
from linebuf.runtime import telemetry

from .controller import HELP_TEXT, TextualEditorAdapter, ViewerHooks


class LineBufferApp(App[None]):
    """Document view with a status line and a command prompt."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#lines-area {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 3;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, document: TextDocument, *, encoding: str = "utf-8") -> None:
        super().__init__()
        self.document = document
        self.editor = LineEditor(encoding=encoding)
        self.adapter: TextualEditorAdapter | None = None
        self._lines_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="lines-area"):
            self._lines_widget = Static("", id="lines-view", markup=False)
            yield self._lines_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Input(placeholder=HELP_TEXT, id="command-line")
        yield Footer()

    def on_mount(self) -> None:
        name = self.document.metadata.file_name or "untitled"
        self.title = f"linebuf - {name}"
        self.editor.open_content(self.document.content)
        hooks = ViewerHooks(
            update_lines=self._update_lines,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter is not None:
            self.adapter.execute(event.value)
        event.input.value = ""

    def action_save(self) -> None:
        if self.document.metadata.path is None:
            self._update_status("error: document has no path")
            return
        try:
            target = save_document(self.document)
        except OSError as exc:
            self._update_status(f"error: {exc}")
            return
        telemetry.record_event("viewer.saved", data={"path": str(target)})
        self._update_status(f"saved {target}")

    def _update_lines(self, lines: Sequence[str]) -> None:
        if self._lines_widget:
            self._lines_widget.update("\n".join(lines))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open a file in the linebuf viewer.")
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding used to display lines (default: utf-8)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    LineBufferApp(open_document(args.file), encoding=args.encoding).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
