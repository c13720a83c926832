"""Adapter wiring a LineEditor into UI callbacks and a small command language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from linebuf.buffer import LineBufferError
from linebuf.editor import LineEditor
from linebuf.runtime import telemetry

LOGGER_NAME = "linebuf.adapters.textual"

HELP_TEXT = (
    "all | read N | update N TEXT | insert N TEXT | delete N [M] | commit | help"
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class ViewerHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_lines: Callable[[Sequence[str]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(slots=True)
class CommandResult:
    ok: bool
    message: str


def render_gutter(lines: Sequence[str], start: int = 0) -> List[str]:
    """Prefix each line with its 1-based number counted from ``start``."""

    if not lines:
        return []
    width = len(str(start + len(lines)))
    return [
        f"{start + offset + 1:>{width}} | {line}" for offset, line in enumerate(lines)
    ]


class TextualEditorAdapter:
    """Bridges a ``LineEditor`` to a Textual-friendly surface."""

    def __init__(self, editor: LineEditor, hooks: ViewerHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self.refresh()

    def refresh(self) -> None:
        current = self.editor.current_range
        lines = render_gutter(self.editor.read_all_lines(), current.start_index)
        self.hooks.update_lines(lines)
        self.hooks.update_status(self.status_text())

    def status_text(self) -> str:
        buffer = self.editor.buffer
        current = self.editor.current_range
        parts = [
            buffer.line_break.name,
            f"{buffer.line_count} lines",
            f"range [{current.start_index}, {current.end_index}) x{current.size}",
        ]
        if buffer.dirty:
            parts.append("modified")
        return " | ".join(parts)

    def show_all(self) -> None:
        """Select the whole buffer again, dropping uncommitted edits."""

        self.editor.open_content(self.editor.buffer)
        self.refresh()

    def show_line(self, index: int) -> str:
        text = self.editor.read_line(index)
        self.refresh()
        return text

    def update_line(self, index: int, text: str) -> None:
        self.editor.update_line(index, text)
        self.refresh()

    def insert_line(self, index: int, text: str) -> None:
        self.editor.add_line_at_index(index, text)
        self.refresh()

    def delete_line(self, index: int, end: Optional[int] = None) -> None:
        if end is None:
            self.editor.delete_line_at_index(index)
        else:
            self.editor.delete_lines_of_range(index, end)
        self.refresh()

    def commit(self) -> None:
        self.editor.commit()
        self.refresh()

    def execute(self, command: str) -> CommandResult:
        """Run one command line; core errors become a failed result."""

        self.hooks.log(f"command -> {command}")
        try:
            message = self._dispatch(command)
        except (LineBufferError, ValueError) as exc:
            telemetry.record_event(
                "viewer.command_failed",
                level="warning",
                data={"command": command, "reason": str(exc)},
                logger_name=LOGGER_NAME,
            )
            result = CommandResult(ok=False, message=f"error: {exc}")
        else:
            result = CommandResult(ok=True, message=message)
        self.hooks.update_status(result.message)
        self.hooks.log(f"result <- {result.message}")
        return result

    def _dispatch(self, command: str) -> str:
        words = command.strip().split(maxsplit=2)
        if not words:
            return self.status_text()
        name, args = words[0].lower(), words[1:]

        if name == "all":
            self.show_all()
            return "showing all lines"
        if name == "read":
            return self.show_line(_index(args, 0))
        if name == "update":
            self.update_line(_index(args, 0), _text(args))
            return "line updated"
        if name == "insert":
            self.insert_line(_index(args, 0), _text(args))
            return "line inserted"
        if name == "delete":
            end = int(args[1]) if len(args) > 1 else None
            self.delete_line(_index(args, 0), end)
            return "lines deleted" if end is not None else "line deleted"
        if name == "commit":
            self.commit()
            return "changes committed"
        if name == "help":
            return HELP_TEXT
        raise ValueError(f"unknown command '{name}'")


def _index(args: Sequence[str], position: int) -> int:
    if len(args) <= position:
        raise ValueError("missing line index")
    return int(args[position])


def _text(args: Sequence[str]) -> str:
    return args[1] if len(args) > 1 else ""
