from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """A position in pre-split source lines.

    Both ``line`` and ``column`` are 0-based. Columns are raw indices into
    the line's text; no display-width adjustment is made. Instances compare
    in document order.
    """

    line: int
    column: int

    @classmethod
    def parse(cls, text: str) -> Location:
        line, sep, column = text.partition(":")
        if not sep:
            raise ValueError(f"expected LINE:COLUMN, got {text!r}")
        try:
            return cls(line=int(line), column=int(column))
        except ValueError:
            raise ValueError(f"expected LINE:COLUMN, got {text!r}") from None

    def format(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range [start, end) of source text.

    ``start`` must not come after ``end``. This is a precondition of the
    resolver; it is checked there, not here.
    """

    start: Location
    end: Location

    @classmethod
    def at(cls, line: int, column: int) -> Span:
        loc = Location(line=line, column=column)
        return cls(start=loc, end=loc)

    @property
    def is_multiline(self) -> bool:
        return self.end.line > self.start.line

    def format(self) -> str:
        return f"{self.start.format()}-{self.end.format()}"


@dataclass(frozen=True, slots=True)
class ContextWindow:
    """How many unmarked lines to show around the span."""

    lines_above: int = 2
    lines_below: int = 3

    def __post_init__(self) -> None:
        if self.lines_above < 0 or self.lines_below < 0:
            raise ValueError(
                f"context window must be non-negative, got above={self.lines_above} below={self.lines_below}"
            )
