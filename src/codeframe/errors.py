from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


@dataclass(slots=True)
class CodeFrameError(Exception):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message


@dataclass(slots=True)
class EmptySource(CodeFrameError):
    message: str = "cannot render a code frame for empty source"


@dataclass(slots=True)
class InvalidSpan(CodeFrameError):
    span: Span | None = None
    line: int | None = None  # offending line index, when the span runs past the source


@dataclass(slots=True)
class ColumnOutOfRange(CodeFrameError):
    line: int = 0
    column: int = 0
    length: int = 0
