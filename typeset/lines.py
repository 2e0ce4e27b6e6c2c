"""Run and line metrics, cluster ordering and glyph positioning."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Optional

from .layout import Glyph


@dataclass
class RunMetrics:
    """Metrics information for a run.

    Decoration offsets are measured from the baseline to the top of the stroke.
    """

    ascent: float = 0.0
    descent: float = 0.0
    leading: float = 0.0
    underline_offset: float = 0.0
    underline_size: float = 0.0
    strikethrough_offset: float = 0.0
    strikethrough_size: float = 0.0


@dataclass
class LineMetrics:
    """Metrics information for a line.

    ``line_height`` is absolute, in layout units. ``advance`` includes trailing
    white space, whose width is ``trailing_whitespace``. ``min_coord`` and
    ``max_coord`` bound the line across the line direction.
    """

    ascent: float = 0.0
    descent: float = 0.0
    leading: float = 0.0
    line_height: float = 0.0
    baseline: float = 0.0
    offset: float = 0.0
    advance: float = 0.0
    trailing_whitespace: float = 0.0
    min_coord: float = 0.0
    max_coord: float = 0.0

    def size(self) -> float:
        """Return the size of the line across the line direction."""
        return self.line_height


@dataclass(frozen=True)
class PositionedInlineBox:
    """The computed position of an inline box within a layout."""

    x: float
    y: float
    width: float
    height: float
    id: int


def _check_index(index: int, cluster_count: int) -> None:
    if index < 0:
        raise ValueError(f"cluster index must not be negative, got {index}")
    if cluster_count < 0:
        raise ValueError(f"cluster count must not be negative, got {cluster_count}")


def logical_to_visual(logical_index: int, cluster_count: int, rtl: bool) -> Optional[int]:
    """Return the visual position of a logical cluster index in a run.

    Returns None when the index is past the end of the run.
    """
    _check_index(logical_index, cluster_count)
    if logical_index >= cluster_count:
        return None
    return cluster_count - 1 - logical_index if rtl else logical_index


def visual_to_logical(visual_index: int, cluster_count: int, rtl: bool) -> Optional[int]:
    """Return the logical cluster index at a visual position in a run.

    Returns None when the position is past the end of the run.
    """
    _check_index(visual_index, cluster_count)
    if visual_index >= cluster_count:
        return None
    return cluster_count - 1 - visual_index if rtl else visual_index


def position_glyphs(glyphs: Iterable[Glyph], offset: float, baseline: float) -> Iterator[Glyph]:
    """Yield copies of ``glyphs`` placed along a baseline starting at ``offset``.

    Each glyph is moved right by the advances of the glyphs before it and down
    to the baseline; the input glyphs are left unchanged.
    """
    pen = offset
    for glyph in glyphs:
        yield replace(glyph, x=glyph.x + pen, y=glyph.y + baseline)
        pen += glyph.advance