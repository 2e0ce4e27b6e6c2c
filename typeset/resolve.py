"""Resolution of style properties against font families and shared caches."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Optional, TypeVar

from .fonts import (
    FontStyle,
    FontWeight,
    FontWidth,
    GenericFamily,
    NamedFamily,
    Setting,
    families_of,
    settings_of,
)
from .layout import Decoration, Style
from .scripts import locale_tag
from .styles import PropertyKind, StyleProperty, TextStyle
from .util import nearly_eq

T = TypeVar("T")

_NO_INDEX = -1


@dataclass(frozen=True)
class Resolved:
    """Handle to an entry of a cache; the default handle refers to nothing."""

    index: int = _NO_INDEX

    @property
    def id(self) -> int:
        """The index of the entry this handle refers to."""
        return self.index


class Cache(Generic[T]):
    """Interning store for sequences of items, addressed by ``Resolved`` handles."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._entries: list[tuple[int, int]] = []

    def clear(self) -> None:
        """Drop every stored sequence."""
        self._items.clear()
        self._entries.clear()

    def insert(self, items: Sequence[T]) -> Resolved:
        """Store ``items``, reusing an equal sequence already stored."""
        items = list(items)
        for index, (start, end) in enumerate(self._entries):
            if end - start == len(items) and self._items[start:end] == items:
                return Resolved(index)
        start = len(self._items)
        self._items.extend(items)
        self._entries.append((start, len(self._items)))
        return Resolved(len(self._entries) - 1)

    def get(self, handle: Resolved) -> Optional[tuple[T, ...]]:
        """Return the sequence a handle refers to, or None for an unknown handle."""
        if not 0 <= handle.index < len(self._entries):
            return None
        start, end = self._entries[handle.index]
        return tuple(self._items[start:end])

    def __len__(self) -> int:
        return len(self._entries)


class FamilyResolver:
    """In-memory font family collection used to resolve font stacks to family ids.

    Named families are looked up without regard to case.
    """

    def __init__(
        self,
        families: Optional[Mapping[str, int]] = None,
        generics: Optional[Mapping[GenericFamily, Iterable[int]]] = None,
    ) -> None:
        self._families = {name.casefold(): family_id for name, family_id in (families or {}).items()}
        self._generics = {GenericFamily(g): tuple(ids) for g, ids in (generics or {}).items()}

    def family_by_name(self, name: str) -> Optional[int]:
        """Return the id of the family with the given name, or None."""
        return self._families.get(name.casefold())

    def generic_families(self, family: GenericFamily) -> tuple[int, ...]:
        """Return the ids of the families that stand for a generic family."""
        return self._generics.get(GenericFamily(family), ())


@dataclass(frozen=True)
class ResolvedProperty:
    """A style property whose shared resources have been resolved."""

    kind: PropertyKind
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PropertyKind(self.kind))


@dataclass(frozen=True)
class ResolvedDecoration:
    """Underline or strikethrough decoration with resolved values."""

    enabled: bool = False
    offset: Optional[float] = None
    size: Optional[float] = None
    brush: Any = None

    def as_layout_decoration(self, default_brush: Any) -> Optional[Decoration]:
        """Return the layout decoration, or None when the decoration is disabled."""
        if not self.enabled:
            return None
        brush = self.brush if self.brush is not None else default_brush
        return Decoration(brush=brush, offset=self.offset, size=self.size)


_DECORATION_FIELDS: dict[PropertyKind, tuple[str, str]] = {
    PropertyKind.UNDERLINE: ("underline", "enabled"),
    PropertyKind.UNDERLINE_OFFSET: ("underline", "offset"),
    PropertyKind.UNDERLINE_SIZE: ("underline", "size"),
    PropertyKind.UNDERLINE_BRUSH: ("underline", "brush"),
    PropertyKind.STRIKETHROUGH: ("strikethrough", "enabled"),
    PropertyKind.STRIKETHROUGH_OFFSET: ("strikethrough", "offset"),
    PropertyKind.STRIKETHROUGH_SIZE: ("strikethrough", "size"),
    PropertyKind.STRIKETHROUGH_BRUSH: ("strikethrough", "brush"),
}

_NEARLY_COMPARED = frozenset(
    {
        PropertyKind.FONT_SIZE,
        PropertyKind.LINE_HEIGHT,
        PropertyKind.WORD_SPACING,
        PropertyKind.LETTER_SPACING,
    }
)

_SCALED = frozenset(
    {PropertyKind.FONT_SIZE, PropertyKind.WORD_SPACING, PropertyKind.LETTER_SPACING}
)

_SCALED_OPTIONAL = frozenset(
    {
        PropertyKind.UNDERLINE_OFFSET,
        PropertyKind.UNDERLINE_SIZE,
        PropertyKind.STRIKETHROUGH_OFFSET,
        PropertyKind.STRIKETHROUGH_SIZE,
    }
)


@dataclass
class ResolvedStyle:
    """Flattened group of style values with resolved resources."""

    font_stack: Resolved = field(default_factory=Resolved)
    font_size: float = 16.0
    font_width: FontWidth = field(default_factory=FontWidth)
    font_style: FontStyle = field(default_factory=FontStyle)
    font_weight: FontWeight = field(default_factory=FontWeight)
    font_variations: Resolved = field(default_factory=Resolved)
    font_features: Resolved = field(default_factory=Resolved)
    locale: Optional[str] = None
    brush: Any = None
    underline: ResolvedDecoration = field(default_factory=ResolvedDecoration)
    strikethrough: ResolvedDecoration = field(default_factory=ResolvedDecoration)
    line_height: float = 1.0
    word_spacing: float = 0.0
    letter_spacing: float = 0.0

    def apply(self, prop: ResolvedProperty) -> None:
        """Set the value named by ``prop`` on this style."""
        target = _DECORATION_FIELDS.get(prop.kind)
        if target is None:
            setattr(self, prop.kind.value, prop.value)
            return
        group, attribute = target
        setattr(self, group, replace(getattr(self, group), **{attribute: prop.value}))

    def check(self, prop: ResolvedProperty) -> bool:
        """Return True when this style already holds the value of ``prop``."""
        target = _DECORATION_FIELDS.get(prop.kind)
        if target is None:
            current = getattr(self, prop.kind.value)
        else:
            group, attribute = target
            current = getattr(getattr(self, group), attribute)
        if prop.kind in _NEARLY_COMPARED:
            return nearly_eq(current, prop.value)
        return current == prop.value

    def as_layout_style(self) -> Style:
        """Return the layout style, with an absolute line height."""
        return Style(
            brush=self.brush,
            underline=self.underline.as_layout_decoration(self.brush),
            strikethrough=self.strikethrough.as_layout_decoration(self.brush),
            line_height=self.line_height * self.font_size,
        )


@dataclass
class RangedStyle:
    """A resolved style covering the byte range ``start:end`` of the text."""

    style: ResolvedStyle
    start: int
    end: int

    @property
    def range(self) -> range:
        """The covered byte range."""
        return range(self.start, self.end)


def _parse_locale(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    parts = text.replace("_", "-").split("-")
    language, rest = parts[0], parts[1:]
    script = region = None
    if rest and len(rest[0]) == 4 and rest[0].isalpha():
        script = rest.pop(0)
    if rest and len(rest[0]) in (2, 3):
        region = rest.pop(0)
    try:
        return locale_tag(language, script, region)
    except ValueError:
        return None


def _scale_optional(value: Optional[float], scale: float) -> Optional[float]:
    return None if value is None else value * scale


class ResolveContext:
    """Caches font stacks, variations and features shared between styles."""

    def __init__(self) -> None:
        self._families: Cache[int] = Cache()
        self._variations: Cache[Setting] = Cache()
        self._features: Cache[Setting] = Cache()

    def resolve_property(
        self, resolver: FamilyResolver, prop: StyleProperty, scale: float
    ) -> ResolvedProperty:
        """Resolve one style property, scaling lengths by ``scale``."""
        kind, value = prop.kind, prop.value
        if kind is PropertyKind.FONT_STACK:
            value = self.resolve_stack(resolver, value)
        elif kind is PropertyKind.FONT_VARIATIONS:
            value = self.resolve_variations(value)
        elif kind is PropertyKind.FONT_FEATURES:
            value = self.resolve_features(value)
        elif kind is PropertyKind.LOCALE:
            value = _parse_locale(value)
        elif kind in _SCALED:
            value = value * scale
        elif kind in _SCALED_OPTIONAL:
            value = _scale_optional(value, scale)
        return ResolvedProperty(kind, value)

    def resolve_entire_style_set(
        self, resolver: FamilyResolver, style: TextStyle, scale: float
    ) -> ResolvedStyle:
        """Resolve every value of an unresolved text style."""
        return ResolvedStyle(
            font_stack=self.resolve_stack(resolver, style.font_stack),
            font_size=style.font_size * scale,
            font_width=style.font_width,
            font_style=style.font_style,
            font_weight=style.font_weight,
            font_variations=self.resolve_variations(style.font_variations),
            font_features=self.resolve_features(style.font_features),
            locale=_parse_locale(style.locale),
            brush=style.brush,
            underline=ResolvedDecoration(
                enabled=style.has_underline,
                offset=_scale_optional(style.underline_offset, scale),
                size=_scale_optional(style.underline_size, scale),
                brush=style.underline_brush,
            ),
            strikethrough=ResolvedDecoration(
                enabled=style.has_strikethrough,
                offset=_scale_optional(style.strikethrough_offset, scale),
                size=_scale_optional(style.strikethrough_size, scale),
                brush=style.strikethrough_brush,
            ),
            line_height=style.line_height,
            word_spacing=style.word_spacing * scale,
            letter_spacing=style.letter_spacing * scale,
        )

    def resolve_stack(self, resolver: FamilyResolver, stack: Any) -> Resolved:
        """Resolve a font stack to a handle for its list of family ids."""
        ids: list[int] = []
        for family in families_of(stack):
            if isinstance(family, NamedFamily):
                family_id = resolver.family_by_name(family.name)
                if family_id is not None:
                    ids.append(family_id)
            else:
                ids.extend(resolver.generic_families(family))
        return self._families.insert(ids)

    def _resolve_settings(self, cache: Cache[Setting], settings: Any, value_type: type) -> Resolved:
        resolved = settings_of(settings, value_type)
        if not resolved:
            return Resolved()
        resolved.sort(key=lambda setting: setting.tag)
        return cache.insert(resolved)

    def resolve_variations(self, variations: Any) -> Resolved:
        """Resolve font variation settings; no settings give the default handle."""
        return self._resolve_settings(self._variations, variations, float)

    def resolve_features(self, features: Any) -> Resolved:
        """Resolve font feature settings; no settings give the default handle."""
        return self._resolve_settings(self._features, features, int)

    def stack(self, handle: Resolved) -> Optional[tuple[int, ...]]:
        """Return the family ids for a stack handle."""
        return self._families.get(handle)

    def variations(self, handle: Resolved) -> Optional[tuple[Setting, ...]]:
        """Return the variation settings for a handle."""
        return self._variations.get(handle)

    def features(self, handle: Resolved) -> Optional[tuple[Setting, ...]]:
        """Return the feature settings for a handle."""
        return self._features.get(handle)

    def clear(self) -> None:
        """Drop every cached stack and setting list."""
        self._families.clear()
        self._variations.clear()
        self._features.clear()