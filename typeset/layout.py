"""Public layout value types and line lookup helpers."""

from __future__ import annotations

import enum
from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


class Alignment(enum.Enum):
    """Horizontal alignment of the lines of a layout."""

    START = "start"
    END = "end"
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    JUSTIFIED = "justified"

    @classmethod
    def default(cls) -> "Alignment":
        """Return the default alignment, ``START``."""
        return cls.START

    def resolve(self, rtl: bool) -> "Alignment":
        """Map direction-aware alignments to ``LEFT`` or ``RIGHT`` for the given direction."""
        if self is Alignment.START:
            return Alignment.RIGHT if rtl else Alignment.LEFT
        if self is Alignment.END:
            return Alignment.LEFT if rtl else Alignment.RIGHT
        return self


@dataclass
class Glyph:
    """Glyph with an offset and advance."""

    id: int = 0
    style_index: int = 0
    x: float = 0.0
    y: float = 0.0
    advance: float = 0.0


@dataclass
class Decoration:
    """Underline or strikethrough decoration.

    ``offset`` and ``size`` of None mean the metrics of the containing run are used.
    """

    brush: Any = None
    offset: Optional[float] = None
    size: Optional[float] = None


@dataclass
class Style:
    """Style properties of a glyph run.

    ``line_height`` is absolute, in layout units (line height multiplier times font size).
    """

    brush: Any = None
    underline: Optional[Decoration] = None
    strikethrough: Optional[Decoration] = None
    line_height: float = 0.0


@dataclass(frozen=True)
class ContentWidths:
    """Lower and upper bounds on the width of a layout.

    ``min`` is the width when every soft break is taken, ``max`` when none is.
    """

    min: float
    max: float


def line_index_for_byte_index(
    text_ranges: Sequence[tuple[int, int]], index: int
) -> Optional[int]:
    """Return the index of the line whose ``(start, end)`` text range holds byte ``index``.

    The ranges must be ordered and not overlap. Returns None when no line holds it.
    """
    starts = [start for start, _ in text_ranges]
    position = bisect_right(starts, index) - 1
    if position < 0:
        return None
    start, end = text_ranges[position]
    if start <= index < end:
        return position
    return None


def line_index_for_offset(
    coord_ranges: Sequence[tuple[float, float]], offset: float
) -> Optional[int]:
    """Return the index of the line holding ``offset`` across the line direction.

    ``coord_ranges`` holds each line's ``(min_coord, max_coord)`` in order. An
    offset on a line boundary belongs to the later line; offsets before the first
    line map to line 0 and offsets past the last line to the last line. Returns
    None when there are no lines.
    """
    if not coord_ranges:
        return None
    if offset < 0.0:
        return 0
    maxes = [max_coord for _, max_coord in coord_ranges]
    position = bisect_right(maxes, offset)
    if position < len(coord_ranges):
        min_coord, max_coord = coord_ranges[position]
        if min_coord <= offset < max_coord:
            return position
    return max(position - 1, 0)