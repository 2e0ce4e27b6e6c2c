"""Style properties, unresolved text styles and style sets."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .fonts import FontStyle, FontWeight, FontWidth


class WhiteSpaceCollapse(enum.Enum):
    """How runs of white space are treated when text is collected."""

    COLLAPSE = "collapse"
    PRESERVE = "preserve"


class PropertyKind(enum.Enum):
    """The kind of a style property; a style set holds at most one of each."""

    FONT_STACK = "font_stack"
    FONT_SIZE = "font_size"
    FONT_WIDTH = "font_width"
    FONT_STYLE = "font_style"
    FONT_WEIGHT = "font_weight"
    FONT_VARIATIONS = "font_variations"
    FONT_FEATURES = "font_features"
    LOCALE = "locale"
    BRUSH = "brush"
    UNDERLINE = "underline"
    UNDERLINE_OFFSET = "underline_offset"
    UNDERLINE_SIZE = "underline_size"
    UNDERLINE_BRUSH = "underline_brush"
    STRIKETHROUGH = "strikethrough"
    STRIKETHROUGH_OFFSET = "strikethrough_offset"
    STRIKETHROUGH_SIZE = "strikethrough_size"
    STRIKETHROUGH_BRUSH = "strikethrough_brush"
    LINE_HEIGHT = "line_height"
    WORD_SPACING = "word_spacing"
    LETTER_SPACING = "letter_spacing"


@dataclass(frozen=True)
class StyleProperty:
    """A single style property: its kind and its value."""

    kind: PropertyKind
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PropertyKind(self.kind))


@dataclass
class TextStyle:
    """A complete set of unresolved style values."""

    font_stack: Any = "sans-serif"
    font_size: float = 16.0
    font_width: FontWidth = field(default_factory=FontWidth)
    font_style: FontStyle = field(default_factory=FontStyle)
    font_weight: FontWeight = field(default_factory=FontWeight)
    font_variations: Any = ()
    font_features: Any = ()
    locale: Optional[str] = None
    brush: Any = None
    has_underline: bool = False
    underline_offset: Optional[float] = None
    underline_size: Optional[float] = None
    underline_brush: Any = None
    has_strikethrough: bool = False
    strikethrough_offset: Optional[float] = None
    strikethrough_size: Optional[float] = None
    strikethrough_brush: Any = None
    line_height: float = 1.2
    word_spacing: float = 0.0
    letter_spacing: float = 0.0


class StyleSet:
    """A long-lived collection of style properties holding at most one of each kind."""

    def __init__(self, font_size: float) -> None:
        self._styles: dict[PropertyKind, StyleProperty] = {}
        self.insert(StyleProperty(PropertyKind.FONT_SIZE, font_size))

    def insert(self, style: StyleProperty) -> Optional[StyleProperty]:
        """Add ``style``, returning the property of the same kind it replaced."""
        previous = self._styles.get(style.kind)
        self._styles[style.kind] = style
        return previous

    def retain(self, predicate: Callable[[StyleProperty], bool]) -> None:
        """Keep only the properties for which ``predicate`` is true."""
        for kind in [k for k, style in self._styles.items() if not predicate(style)]:
            del self._styles[kind]

    def remove(self, kind: PropertyKind) -> Optional[StyleProperty]:
        """Remove and return the property of the given kind, if any."""
        return self._styles.pop(PropertyKind(kind), None)

    def get(self, kind: PropertyKind) -> Optional[StyleProperty]:
        """Return the property of the given kind, if any."""
        return self._styles.get(PropertyKind(kind))

    def __iter__(self) -> Iterator[StyleProperty]:
        return iter(list(self._styles.values()))

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, kind: object) -> bool:
        try:
            return PropertyKind(kind) in self._styles
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"StyleSet({list(self._styles.values())!r})"