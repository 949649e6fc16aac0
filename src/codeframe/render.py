from __future__ import annotations

from collections.abc import Mapping, Sequence

from .resolver import DisplayRange, Marker


MARK = "> "
INDENT = "  "
SEPARATOR = " | "
CARET = "^"


def render_frame(
    lines: Sequence[str],
    display: DisplayRange,
    markers: Mapping[int, Marker],
) -> str:
    # The gutter is sized for the exclusive end bound so every row lines up.
    gutter = len(str(display.end)) + 1
    blank = " " * gutter

    out: list[str] = []
    for i in display.indices():
        number = str(i).ljust(gutter)
        marker = markers.get(i)
        if marker is None:
            out.append(f"{INDENT}{number}{SEPARATOR}{lines[i]}")
            continue
        out.append(f"{MARK}{number}{SEPARATOR}{lines[i]}")
        out.append(f"{INDENT}{blank}{SEPARATOR}{' ' * marker.start_column}{CARET * marker.caret_count}")
    return "\n".join(out)
