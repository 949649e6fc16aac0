from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .render import render_frame
from .resolver import DisplayRange, MarkerSet, resolve
from .spans import ContextWindow, Span


@dataclass(frozen=True, slots=True)
class CodeFrame:
    display: DisplayRange
    markers: MarkerSet
    text: str


def build_code_frame(
    lines: Sequence[str],
    span: Span,
    options: ContextWindow | None = None,
    *,
    strict: bool = False,
) -> CodeFrame:
    display, markers = resolve(lines, span, options or ContextWindow(), strict=strict)
    return CodeFrame(display=display, markers=markers, text=render_frame(lines, display, markers))


def render_code_frame(
    lines: Sequence[str],
    span: Span,
    options: ContextWindow | None = None,
    *,
    strict: bool = False,
) -> str:
    """Render ``span`` over ``lines`` as a numbered frame with caret markers.

    ``lines`` must already be split (no line terminators). Raises
    EmptySource, InvalidSpan, or (with ``strict``) ColumnOutOfRange.
    """
    return build_code_frame(lines, span, options, strict=strict).text
