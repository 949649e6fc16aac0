"""Span resolution: which lines to show, and where the carets go."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import ColumnOutOfRange, EmptySource, InvalidSpan
from .spans import ContextWindow, Span


@dataclass(frozen=True, slots=True)
class DisplayRange:
    """Lines ``[start, end)`` to print."""

    start: int
    end: int

    def indices(self) -> range:
        return range(self.start, self.end)

    def __len__(self) -> int:
        return max(0, self.end - self.start)


@dataclass(frozen=True, slots=True)
class Marker:
    start_column: int
    length: int

    @property
    def caret_count(self) -> int:
        # Zero-width spans still get one visible caret.
        return max(self.length, 1)


MarkerSet = dict[int, Marker]  # line index -> marker


def resolve(
    lines: Sequence[str],
    span: Span,
    window: ContextWindow,
    *,
    strict: bool = False,
) -> tuple[DisplayRange, MarkerSet]:
    """Compute the display range and per-line markers for ``span``.

    Columns past the end of their line are clamped to the line length,
    unless ``strict`` is set, in which case they raise ColumnOutOfRange.
    """
    _check_span(lines, span)

    first = span.start.line
    last = span.end.line
    start = max(0, first - window.lines_above)
    end = max(0, min(len(lines), last + 1 + window.lines_below))

    start_col = _column(lines, first, span.start.column, strict=strict)
    end_col = _column(lines, last, span.end.column, strict=strict)

    markers: MarkerSet = {}
    if span.is_multiline:
        markers[first] = Marker(start_col, len(lines[first]) - start_col)
        for i in range(first + 1, last):
            markers[i] = Marker(0, len(lines[i]))
        markers[last] = Marker(0, end_col)
    elif start_col == end_col:
        markers[first] = Marker(start_col, 0)
    else:
        markers[first] = Marker(start_col, end_col - start_col)

    return DisplayRange(start=start, end=end), markers


def _check_span(lines: Sequence[str], span: Span) -> None:
    if not lines:
        raise EmptySource()
    for loc in (span.start, span.end):
        if loc.line < 0 or loc.column < 0:
            raise InvalidSpan(
                message=f"negative location {loc.format()} in span {span.format()}",
                span=span,
            )
    if span.end.line >= len(lines):
        raise InvalidSpan(
            message=f"span ends on line {span.end.line} but source has {len(lines)} line(s)",
            hint=f"valid line indices are 0..{len(lines) - 1}",
            span=span,
            line=span.end.line,
        )
    if span.start > span.end:
        raise InvalidSpan(
            message=f"span start {span.start.format()} comes after end {span.end.format()}",
            span=span,
        )


def _column(lines: Sequence[str], line: int, column: int, *, strict: bool) -> int:
    length = len(lines[line])
    if column <= length:
        return column
    if strict:
        raise ColumnOutOfRange(
            message=f"column {column} is past the end of line {line} (length {length})",
            line=line,
            column=column,
            length=length,
        )
    return length
