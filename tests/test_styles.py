import pytest

from typeset.fonts import FontStyle, FontWeight, FontWidth, GenericFamily
from typeset.styles import (
    PropertyKind,
    StyleProperty,
    StyleSet,
    TextStyle,
    WhiteSpaceCollapse,
)


def test_style_set_starts_with_font_size():
    styles = StyleSet(16.0)
    assert len(styles) == 1
    assert PropertyKind.FONT_SIZE in styles
    assert styles.get(PropertyKind.FONT_SIZE) == StyleProperty(PropertyKind.FONT_SIZE, 16.0)


def test_insert_returns_replaced_property():
    styles = StyleSet(16.0)
    previous = styles.insert(StyleProperty(PropertyKind.FONT_SIZE, 20.0))
    assert previous == StyleProperty(PropertyKind.FONT_SIZE, 16.0)
    assert styles.get(PropertyKind.FONT_SIZE).value == 20.0
    assert len(styles) == 1


def test_insert_new_kind_returns_none():
    styles = StyleSet(16.0)
    assert styles.insert(StyleProperty(PropertyKind.BRUSH, "red")) is None
    assert len(styles) == 2


def test_font_stack_overwrites():
    styles = StyleSet(16.0)
    styles.insert(StyleProperty(PropertyKind.FONT_STACK, "Roboto"))
    styles.insert(StyleProperty(PropertyKind.FONT_STACK, GenericFamily.SERIF))
    assert styles.get(PropertyKind.FONT_STACK).value == GenericFamily.SERIF


def test_remove():
    styles = StyleSet(16.0)
    styles.insert(StyleProperty(PropertyKind.UNDERLINE, True))
    assert styles.remove(PropertyKind.UNDERLINE) == StyleProperty(PropertyKind.UNDERLINE, True)
    assert styles.remove(PropertyKind.UNDERLINE) is None
    assert PropertyKind.UNDERLINE not in styles


def test_retain():
    styles = StyleSet(16.0)
    styles.insert(StyleProperty(PropertyKind.LINE_HEIGHT, 1.3))
    styles.insert(StyleProperty(PropertyKind.BRUSH, "blue"))
    styles.retain(lambda prop: prop.kind != PropertyKind.BRUSH)
    assert {prop.kind for prop in styles} == {PropertyKind.FONT_SIZE, PropertyKind.LINE_HEIGHT}


def test_iteration_yields_every_property():
    styles = StyleSet(12.0)
    styles.insert(StyleProperty(PropertyKind.LETTER_SPACING, 0.5))
    assert sorted(prop.kind.value for prop in styles) == ["font_size", "letter_spacing"]


def test_contains_with_unknown_value():
    assert "nonsense" not in StyleSet(16.0)
    assert "font_size" in StyleSet(16.0)


def test_property_kind_coerced_from_name():
    prop = StyleProperty("font_weight", FontWeight.BOLD)
    assert prop.kind is PropertyKind.FONT_WEIGHT


def test_property_rejects_unknown_kind():
    with pytest.raises(ValueError):
        StyleProperty("font_colour", 1)


def test_text_style_defaults():
    style = TextStyle()
    assert style.font_stack == "sans-serif"
    assert style.font_size == 16.0
    assert style.line_height == 1.2
    assert style.font_weight == FontWeight.NORMAL
    assert style.font_width == FontWidth.NORMAL
    assert style.font_style == FontStyle.NORMAL
    assert style.has_underline is False
    assert style.underline_brush is None


def test_text_style_instances_are_independent():
    first = TextStyle()
    second = TextStyle(font_size=24.0)
    assert first != second
    assert first == TextStyle()


def test_white_space_modes_are_distinct():
    assert WhiteSpaceCollapse("collapse") is WhiteSpaceCollapse.COLLAPSE
    assert WhiteSpaceCollapse.COLLAPSE != WhiteSpaceCollapse.PRESERVE