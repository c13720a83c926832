"""Command-line entry point: print a file's metadata and lines, optionally convert it."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from linebuf.buffer import LineBreakKind, LineBufferError
from linebuf.document import describe_metadata, open_document, save_bytes
from linebuf.editor import LineEditor
from linebuf.runtime import telemetry

LINE_BREAK_CHOICES = ("crlf", "lf", "cr")


def _env_line_break(key: str) -> Optional[str]:
    value = os.environ.get(key)
    if value is None or value.lower() not in LINE_BREAK_CHOICES:
        return None
    return value.lower()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="linebuf",
        description="Show a text file line by line and rewrite its line breaks.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Path to the file to open (at most one)",
    )
    parser.add_argument(
        "--line-break",
        choices=LINE_BREAK_CHOICES,
        help="Line break to use when writing the content back out",
    )
    parser.add_argument(
        "--default-line-break",
        choices=LINE_BREAK_CHOICES,
        default=_env_line_break("LINEBUF_DEFAULT_LINE_BREAK"),
        help="Line break assumed for content without any (default: platform)",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the reserialized bytes to this path",
    )
    parser.add_argument(
        "--encoding",
        default=os.environ.get("LINEBUF_ENCODING", "utf-8"),
        help="Encoding used to display lines (default: utf-8)",
    )
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        help="Telemetry preset to activate",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Open the file in the Textual viewer instead of printing it",
    )
    args = parser.parse_args(argv)
    if len(args.files) > 1:
        parser.error(
            f"Too many arguments. Expected: 1 but was: {len(args.files)}. "
            "Please specify only the path to the edited file"
        )
    args.file = args.files[0] if args.files else None
    return args


def run(args: argparse.Namespace) -> int:
    default_line_break = (
        LineBreakKind.parse(args.default_line_break)
        if args.default_line_break
        else None
    )
    document = open_document(args.file, default_line_break=default_line_break)
    if args.line_break:
        document.content.set_line_break(LineBreakKind.parse(args.line_break))

    if args.tui:
        from linebuf.adapters.textual.app import LineBufferApp

        LineBufferApp(document, encoding=args.encoding).run()
    else:
        editor = LineEditor(encoding=args.encoding)
        editor.open_content(document.content)
        print("[---METADATA---]")
        for line in describe_metadata(document.metadata):
            print(line)
        print(f"line break: {document.content.line_break.name}")
        print("\n[---CONTENT----]")
        for line in editor.read_all_lines():
            print(line)

    if args.output:
        save_bytes(document.content.to_bytes(), args.output)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    try:
        return run(args)
    except (LineBufferError, OSError) as exc:
        telemetry.record_event(
            "cli.failed", level="error", data={"reason": str(exc)}
        )
        print(f"linebuf: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
