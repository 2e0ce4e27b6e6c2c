import pytest
from hypothesis import given
from hypothesis import strategies as st

from typeset.layout import Glyph
from typeset.lines import (
    LineMetrics,
    PositionedInlineBox,
    RunMetrics,
    logical_to_visual,
    position_glyphs,
    visual_to_logical,
)


def test_line_metrics_size_is_line_height():
    metrics = LineMetrics(line_height=19.0, ascent=15.0)
    assert metrics.size() == 19.0


def test_line_metrics_default_size_is_zero():
    assert LineMetrics().size() == 0.0


def test_run_metrics_defaults_are_zero():
    metrics = RunMetrics()
    assert (metrics.ascent, metrics.descent, metrics.underline_size) == (0.0, 0.0, 0.0)


def test_positioned_inline_box_is_frozen():
    box = PositionedInlineBox(x=1.0, y=2.0, width=50.0, height=50.0, id=7)
    with pytest.raises(AttributeError):
        box.x = 3.0
    assert (box.x, box.y, box.width, box.height, box.id) == (1.0, 2.0, 50.0, 50.0, 7)


def test_ltr_ordering_is_identity():
    assert [logical_to_visual(i, 4, False) for i in range(4)] == [0, 1, 2, 3]


def test_rtl_ordering_reverses():
    assert [logical_to_visual(i, 4, True) for i in range(4)] == [3, 2, 1, 0]


@pytest.mark.parametrize("rtl", [False, True])
def test_index_past_end_is_none(rtl):
    assert logical_to_visual(4, 4, rtl) is None
    assert visual_to_logical(4, 4, rtl) is None
    assert logical_to_visual(0, 0, rtl) is None


def test_negative_index_raises():
    with pytest.raises(ValueError):
        logical_to_visual(-1, 3, False)
    with pytest.raises(ValueError):
        visual_to_logical(-1, 3, True)


@given(st.integers(min_value=1, max_value=200), st.data(), st.booleans())
def test_round_trip(count, data, rtl):
    index = data.draw(st.integers(min_value=0, max_value=count - 1))
    visual = logical_to_visual(index, count, rtl)
    assert 0 <= visual < count
    assert visual_to_logical(visual, count, rtl) == index


@given(st.integers(min_value=0, max_value=100), st.booleans())
def test_ordering_is_permutation(count, rtl):
    visuals = [logical_to_visual(i, count, rtl) for i in range(count)]
    assert sorted(visuals) == list(range(count))


def test_position_glyphs_accumulates_advances():
    glyphs = [
        Glyph(id=1, x=0.0, y=0.0, advance=5.0),
        Glyph(id=2, x=1.0, y=-2.0, advance=3.0),
        Glyph(id=3, x=0.0, y=0.0, advance=4.0),
    ]
    placed = list(position_glyphs(glyphs, 10.0, 20.0))
    assert [g.id for g in placed] == [1, 2, 3]
    assert placed[0].x == 10.0
    assert placed[0].y == 20.0
    assert placed[1].x == 10.0 + 5.0 + 1.0
    assert placed[1].y == 20.0 - 2.0
    assert placed[2].x == 10.0 + 5.0 + 3.0


def test_position_glyphs_leaves_input_unchanged():
    glyph = Glyph(id=9, x=2.0, y=3.0, advance=6.0)
    list(position_glyphs([glyph], 4.0, 8.0))
    assert (glyph.x, glyph.y) == (2.0, 3.0)


def test_position_glyphs_empty():
    assert list(position_glyphs([], 1.0, 2.0)) == []


@given(
    st.lists(st.floats(min_value=0.0, max_value=100.0), max_size=20),
    st.floats(min_value=-100.0, max_value=100.0),
)
def test_position_glyphs_is_monotonic_for_zero_offsets(advances, offset):
    glyphs = [Glyph(advance=a) for a in advances]
    placed = list(position_glyphs(glyphs, offset, 0.0))
    assert len(placed) == len(glyphs)
    xs = [g.x for g in placed]
    assert xs == sorted(xs)
    if placed:
        assert placed[0].x == offset
        assert all(g.y == 0.0 for g in placed)