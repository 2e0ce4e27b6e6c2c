"""Range based style application."""

from __future__ import annotations

import copy
from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional

from .resolve import RangedStyle, ResolvedProperty, ResolvedStyle


@dataclass(frozen=True)
class _RangedProperty:
    prop: ResolvedProperty
    start: int
    end: int


@dataclass(frozen=True)
class _SplitRange:
    first: Optional[int]
    replace_start: int
    replace_len: int
    last: Optional[int]


def resolve_range(start: Optional[int], end: Optional[int], length: int) -> tuple[int, int]:
    """Clamp a half-open range to ``0..length``; None stands for an open bound."""
    lo = 0 if start is None else start
    hi = length if end is None else end
    return min(lo, length), min(hi, length)


def _clone(span: RangedStyle) -> RangedStyle:
    return RangedStyle(copy.copy(span.style), span.start, span.end)


def _split_range(prop: _RangedProperty, spans: list[RangedStyle]) -> _SplitRange:
    starts = [span.start for span in spans]
    position = bisect_left(starts, prop.start)
    if position < len(starts) and starts[position] == prop.start:
        start_index = position
    else:
        start_index = max(position - 1, 0)
    end_index = next(
        (i for i in range(start_index, len(spans)) if spans[i].end >= prop.end),
        len(spans) - 1,
    )
    first: Optional[int] = None
    last: Optional[int] = None
    if spans[start_index].start < prop.start:
        first = start_index
        replace_start = start_index + 1
    else:
        replace_start = start_index
    if spans[end_index].end > prop.end:
        last = end_index
        replace_len = max(end_index - replace_start, 0)
    else:
        replace_len = max(end_index + 1 - replace_start, 0)
    return _SplitRange(first, replace_start, replace_len, last)


class RangedStyleBuilder:
    """Builds an ordered sequence of non-overlapping styled ranges from ranged properties."""

    def __init__(self) -> None:
        self._properties: list[_RangedProperty] = []
        self._default_style = ResolvedStyle()
        self._length: Optional[int] = None

    def begin(self, length: int) -> None:
        """Prepare to accept properties for text of ``length`` bytes."""
        self._properties.clear()
        self._default_style = ResolvedStyle()
        self._length = length

    def _require_begun(self) -> int:
        if self._length is None:
            raise RuntimeError("begin() must be called before pushing properties")
        return self._length

    def push_default(self, prop: ResolvedProperty) -> None:
        """Apply a property to the whole text."""
        self._require_begun()
        self._default_style.apply(prop)

    def push(self, prop: ResolvedProperty, start: Optional[int], end: Optional[int]) -> None:
        """Apply a property to the byte range ``start:end``; None leaves a bound open."""
        length = self._require_begun()
        lo, hi = resolve_range(start, end, length)
        self._properties.append(_RangedProperty(prop, lo, hi))

    def _reset(self) -> None:
        self._properties.clear()
        self._default_style = ResolvedStyle()
        self._length = None

    def finish(self) -> list[RangedStyle]:
        """Compute the styled ranges and reset the builder."""
        if self._length is None:
            self._reset()
            return []
        styles = [RangedStyle(copy.copy(self._default_style), 0, self._length)]
        for ranged in self._properties:
            if ranged.start > ranged.end:
                continue
            self._apply_ranged(ranged, styles)
        merged: list[RangedStyle] = []
        for span in styles:
            if merged and merged[-1].style == span.style:
                merged[-1].end = span.end
            else:
                merged.append(span)
        self._reset()
        return merged

    @staticmethod
    def _apply_ranged(ranged: _RangedProperty, styles: list[RangedStyle]) -> None:
        prop = ranged.prop
        split = _split_range(ranged, styles)
        inserted = 0
        if split.first is not None:
            first = split.first
            original = styles[first]
            if not original.style.check(prop):
                new_span = _clone(original)
                original_end = original.end
                original.end = ranged.start
                new_span.start = ranged.start
                new_span.style.apply(prop)
                if split.replace_len == 0 and split.last == first:
                    new_end_span = _clone(original)
                    new_end_span.start = ranged.end
                    new_end_span.end = original_end
                    new_span.end = ranged.end
                    styles[first + 1 : first + 1] = [new_span, new_end_span]
                    return
                styles.insert(first + 1, new_span)
                inserted += 1
        replace_start = split.replace_start + inserted
        for span in styles[replace_start : replace_start + split.replace_len]:
            span.style.apply(prop)
        if split.last is not None:
            last = split.last + inserted
            original = styles[last]
            if not original.style.check(prop):
                new_span = _clone(original)
                original.start = ranged.end
                new_span.end = ranged.end
                new_span.style.apply(prop)
                styles.insert(last, new_span)