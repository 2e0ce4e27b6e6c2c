import pytest
from hypothesis import given
from hypothesis import strategies as st

from typeset.layout import (
    Alignment,
    ContentWidths,
    Decoration,
    Glyph,
    Style,
    line_index_for_byte_index,
    line_index_for_offset,
)


def test_alignment_default_is_start():
    assert Alignment.default() is Alignment.START


@pytest.mark.parametrize(
    "alignment, rtl, expected",
    [
        (Alignment.START, False, Alignment.LEFT),
        (Alignment.START, True, Alignment.RIGHT),
        (Alignment.END, False, Alignment.RIGHT),
        (Alignment.END, True, Alignment.LEFT),
        (Alignment.MIDDLE, True, Alignment.MIDDLE),
        (Alignment.JUSTIFIED, False, Alignment.JUSTIFIED),
        (Alignment.LEFT, True, Alignment.LEFT),
    ],
)
def test_alignment_resolve(alignment, rtl, expected):
    assert alignment.resolve(rtl) is expected


def test_glyph_defaults_are_zero():
    glyph = Glyph()
    assert (glyph.id, glyph.style_index, glyph.x, glyph.y, glyph.advance) == (0, 0, 0.0, 0.0, 0.0)


def test_style_holds_decorations():
    underline = Decoration(brush="red", offset=None, size=2.0)
    style = Style(brush="black", underline=underline, line_height=19.2)
    assert style.underline.size == 2.0
    assert style.underline.offset is None
    assert style.strikethrough is None


def test_content_widths_fields():
    widths = ContentWidths(min=10.0, max=50.0)
    assert widths.min <= widths.max


def test_byte_index_lookup():
    ranges = [(0, 5), (5, 10), (10, 14)]
    assert line_index_for_byte_index(ranges, 0) == 0
    assert line_index_for_byte_index(ranges, 5) == 1
    assert line_index_for_byte_index(ranges, 13) == 2


def test_byte_index_outside_text():
    ranges = [(0, 5), (5, 10)]
    assert line_index_for_byte_index(ranges, 10) is None
    assert line_index_for_byte_index([], 0) is None


def test_offset_before_first_line_is_first():
    assert line_index_for_offset([(0.0, 20.0), (20.0, 40.0)], -3.0) == 0


def test_offset_with_no_lines():
    assert line_index_for_offset([], 5.0) is None
    assert line_index_for_offset([], -5.0) is None


def test_offset_on_boundary_belongs_to_later_line():
    assert line_index_for_offset([(0.0, 20.0), (20.0, 40.0)], 20.0) == 1


def test_offset_past_end_is_last_line():
    assert line_index_for_offset([(0.0, 20.0), (20.0, 40.0)], 100.0) == 1


@given(
    st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=20),
    st.data(),
)
def test_offset_lookup_contains_offset(heights, data):
    ranges = []
    y = 0.0
    for height in heights:
        ranges.append((y, y + height))
        y += height
    offset = data.draw(st.floats(min_value=0.0, max_value=y, exclude_max=True))
    index = line_index_for_offset(ranges, offset)
    low, high = ranges[index]
    assert low <= offset < high


@given(
    st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=20),
    st.data(),
)
def test_byte_lookup_contains_index(lengths, data):
    ranges = []
    start = 0
    for length in lengths:
        ranges.append((start, start + length))
        start += length
    index = data.draw(st.integers(min_value=0, max_value=start - 1))
    line = line_index_for_byte_index(ranges, index)
    low, high = ranges[line]
    assert low <= index < high