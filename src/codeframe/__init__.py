from __future__ import annotations

from .api import CodeFrame, build_code_frame, render_code_frame
from .errors import CodeFrameError, ColumnOutOfRange, EmptySource, InvalidSpan
from .render import render_frame
from .resolver import DisplayRange, Marker, MarkerSet, resolve
from .spans import ContextWindow, Location, Span

__all__ = [
    "CodeFrame",
    "CodeFrameError",
    "ColumnOutOfRange",
    "ContextWindow",
    "DisplayRange",
    "EmptySource",
    "InvalidSpan",
    "Location",
    "Marker",
    "MarkerSet",
    "Span",
    "build_code_frame",
    "render_code_frame",
    "render_frame",
    "resolve",
]
