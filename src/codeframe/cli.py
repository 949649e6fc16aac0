from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path

from .api import build_code_frame
from .errors import CodeFrameError
from .spans import ContextWindow, Location, Span


logger = logging.getLogger(__name__)


def _to_jsonable(obj):
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, tuple):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, list):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    return obj


def _location(text: str) -> Location:
    try:
        return Location.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


_NEWLINE_RE = re.compile(r"\r?\n")


def _split_lines(text: str) -> list[str]:
    # Only \n and \r\n end a line; form feeds and other separators stay in the text.
    lines = _NEWLINE_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _read_lines(file: str) -> list[str]:
    if file == "-":
        return _split_lines(sys.stdin.read())
    return _split_lines(Path(file).expanduser().read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="codeframe", description="Render a code frame for a span of a source file")
    ap.add_argument("file", help="Source file ('-' reads stdin)")
    ap.add_argument("--start", type=_location, required=True, help="Span start as LINE:COLUMN (0-based)")
    ap.add_argument("--end", type=_location, default=None, help="Span end as LINE:COLUMN (default: --start)")
    ap.add_argument("-A", "--lines-above", type=int, default=2, help="Context lines above the span")
    ap.add_argument("-B", "--lines-below", type=int, default=3, help="Context lines below the span")
    ap.add_argument("--strict", action="store_true", help="Reject columns past the end of their line")
    ap.add_argument("-m", "--message", help="Print FILE:LINE:COLUMN: MESSAGE above the frame")
    ap.add_argument("--json", action="store_true", help="Print the resolved frame as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        window = ContextWindow(lines_above=args.lines_above, lines_below=args.lines_below)
    except ValueError as e:
        ap.error(str(e))
    span = Span(start=args.start, end=args.end or args.start)

    try:
        lines = _read_lines(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    logger.debug("read %d line(s) from %s", len(lines), args.file)

    try:
        frame = build_code_frame(lines, span, window, strict=args.strict)
    except CodeFrameError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logger.debug("display range %d..%d, %d marked line(s)", frame.display.start, frame.display.end, len(frame.markers))

    if args.json:
        payload = {
            "display": _to_jsonable(frame.display),
            "markers": _to_jsonable(frame.markers),
            "frame": frame.text,
        }
        if args.message:
            payload["message"] = args.message
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    if args.message:
        print(f"{args.file}:{span.start.format()}: {args.message}")
    print(frame.text)
    return 0
