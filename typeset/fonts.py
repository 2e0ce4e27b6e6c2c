"""Font families, font attributes and OpenType settings."""

from __future__ import annotations

import enum
import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, TypeVar, Union

_ASCII_WHITESPACE = " \t\n\r\x0c"
_QUOTES = "\"'"


class GenericFamily(enum.Enum):
    """CSS generic font family."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    SYSTEM_UI = "system-ui"
    UI_SERIF = "ui-serif"
    UI_SANS_SERIF = "ui-sans-serif"
    UI_MONOSPACE = "ui-monospace"
    UI_ROUNDED = "ui-rounded"
    EMOJI = "emoji"
    MATH = "math"
    FANG_SONG = "fangsong"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NamedFamily:
    """A font family referred to by name."""

    name: str

    def __str__(self) -> str:
        return json.dumps(self.name, ensure_ascii=False)


FontFamily = Union[NamedFamily, GenericFamily]


@dataclass(frozen=True)
class FontStyle:
    """Visual slant of a font: normal, italic or oblique with an optional angle."""

    kind: str = "normal"
    angle: Optional[float] = None

    NORMAL: ClassVar["FontStyle"]
    ITALIC: ClassVar["FontStyle"]

    def __post_init__(self) -> None:
        if self.kind not in ("normal", "italic", "oblique"):
            raise ValueError(f"unknown font style {self.kind!r}")
        if self.angle is not None and self.kind != "oblique":
            raise ValueError("only oblique styles carry an angle")

    @classmethod
    def oblique(cls, angle: Optional[float] = None) -> "FontStyle":
        """Return an oblique style with the given angle in degrees."""
        return cls("oblique", angle)


FontStyle.NORMAL = FontStyle("normal")
FontStyle.ITALIC = FontStyle("italic")


@dataclass(frozen=True, order=True)
class FontWeight:
    """Visual weight of a font, on the CSS 1-1000 scale."""

    value: float = 400.0

    THIN: ClassVar["FontWeight"]
    EXTRA_LIGHT: ClassVar["FontWeight"]
    LIGHT: ClassVar["FontWeight"]
    SEMI_LIGHT: ClassVar["FontWeight"]
    NORMAL: ClassVar["FontWeight"]
    MEDIUM: ClassVar["FontWeight"]
    SEMI_BOLD: ClassVar["FontWeight"]
    BOLD: ClassVar["FontWeight"]
    EXTRA_BOLD: ClassVar["FontWeight"]
    BLACK: ClassVar["FontWeight"]
    EXTRA_BLACK: ClassVar["FontWeight"]


FontWeight.THIN = FontWeight(100.0)
FontWeight.EXTRA_LIGHT = FontWeight(200.0)
FontWeight.LIGHT = FontWeight(300.0)
FontWeight.SEMI_LIGHT = FontWeight(350.0)
FontWeight.NORMAL = FontWeight(400.0)
FontWeight.MEDIUM = FontWeight(500.0)
FontWeight.SEMI_BOLD = FontWeight(600.0)
FontWeight.BOLD = FontWeight(700.0)
FontWeight.EXTRA_BOLD = FontWeight(800.0)
FontWeight.BLACK = FontWeight(900.0)
FontWeight.EXTRA_BLACK = FontWeight(950.0)


@dataclass(frozen=True, order=True)
class FontWidth:
    """Visual width of a font as a ratio of the normal width."""

    value: float = 1.0

    ULTRA_CONDENSED: ClassVar["FontWidth"]
    EXTRA_CONDENSED: ClassVar["FontWidth"]
    CONDENSED: ClassVar["FontWidth"]
    SEMI_CONDENSED: ClassVar["FontWidth"]
    NORMAL: ClassVar["FontWidth"]
    SEMI_EXPANDED: ClassVar["FontWidth"]
    EXPANDED: ClassVar["FontWidth"]
    EXTRA_EXPANDED: ClassVar["FontWidth"]
    ULTRA_EXPANDED: ClassVar["FontWidth"]


FontWidth.ULTRA_CONDENSED = FontWidth(0.5)
FontWidth.EXTRA_CONDENSED = FontWidth(0.625)
FontWidth.CONDENSED = FontWidth(0.75)
FontWidth.SEMI_CONDENSED = FontWidth(0.875)
FontWidth.NORMAL = FontWidth(1.0)
FontWidth.SEMI_EXPANDED = FontWidth(1.125)
FontWidth.EXPANDED = FontWidth(1.25)
FontWidth.EXTRA_EXPANDED = FontWidth(1.5)
FontWidth.ULTRA_EXPANDED = FontWidth(2.0)


T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Setting(Generic[T]):
    """An OpenType feature or variation setting: a four byte tag and a value."""

    tag: int
    value: T

    def __post_init__(self) -> None:
        if not 0 <= self.tag <= 0xFFFFFFFF:
            raise ValueError(f"tag {self.tag} does not fit in four bytes")

    @property
    def tag_name(self) -> str:
        """The tag as four characters."""
        return self.tag.to_bytes(4, "big").decode("latin-1")


def parse_generic_family(name: str) -> Optional[GenericFamily]:
    """Return the generic family with the given CSS name, or None."""
    try:
        return GenericFamily(name.strip())
    except ValueError:
        return None


def parse_family_list(source: str) -> Iterator[FontFamily]:
    """Yield the families of a comma separated CSS font family list."""
    pos = 0
    length = len(source)
    while True:
        while pos < length and (source[pos] in _ASCII_WHITESPACE or source[pos] == ","):
            pos += 1
        if pos >= length:
            return
        first = source[pos]
        if first in _QUOTES:
            start = pos + 1
            end = source.find(first, start)
            if end < 0:
                yield NamedFamily(source[start:].strip())
                return
            yield NamedFamily(source[start:end].strip())
            pos = end + 1
            continue
        end = source.find(",", pos)
        if end < 0:
            name = source[pos:]
            pos = length
        else:
            name = source[pos:end]
            pos = end + 1
        name = name.strip()
        generic = parse_generic_family(name)
        yield generic if generic is not None else NamedFamily(name)


def parse_family(source: str) -> Optional[FontFamily]:
    """Parse a single family name or generic family; quoting forces a named family."""
    return next(parse_family_list(source), None)


def families_of(stack: Union[str, FontFamily, Iterable[FontFamily]]) -> list[FontFamily]:
    """Return the ordered families of a font stack.

    A stack is a CSS source string, a single family, or a sequence of families.
    """
    if isinstance(stack, str):
        return list(parse_family_list(stack))
    if isinstance(stack, (NamedFamily, GenericFamily)):
        return [stack]
    families = list(stack)
    for family in families:
        if not isinstance(family, (NamedFamily, GenericFamily)):
            raise TypeError(f"not a font family: {family!r}")
    return families


def _check_value_type(value_type: type) -> None:
    if value_type is not int and value_type is not float:
        raise ValueError("value_type must be int or float")


def _tag_from_text(text: str) -> Optional[int]:
    if len(text) != 4 or not all(" " <= ch <= "~" for ch in text):
        return None
    return int.from_bytes(text.encode("ascii"), "big")


def _parse_value(text: str, value_type: type) -> Optional[Union[int, float]]:
    if value_type is int:
        if text in ("", "on"):
            return 1
        if text == "off":
            return 0
        try:
            return int(text)
        except ValueError:
            return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_setting(entry: str, value_type: type) -> Optional[Setting]:
    if entry[0] in _QUOTES:
        end = entry.find(entry[0], 1)
        if end < 0:
            return None
        tag_text, rest = entry[1:end], entry[end + 1 :]
    else:
        tag_text, _, rest = entry.partition(" ")
    tag = _tag_from_text(tag_text)
    if tag is None:
        return None
    value = _parse_value(rest.strip(), value_type)
    if value is None:
        return None
    return Setting(tag, value)


def parse_settings(source: str, value_type: type) -> Iterator[Setting]:
    """Yield settings from CSS syntax such as ``"wght" 700, "liga" off``.

    ``value_type`` is ``int`` for features and ``float`` for variations.
    Malformed entries are skipped.
    """
    _check_value_type(value_type)
    for entry in source.split(","):
        entry = entry.strip()
        if not entry:
            continue
        setting = _parse_setting(entry, value_type)
        if setting is not None:
            yield setting


def settings_of(settings: Union[str, Iterable[Setting]], value_type: type) -> list[Setting]:
    """Return settings from a CSS source string or a sequence of settings."""
    _check_value_type(value_type)
    if isinstance(settings, str):
        return list(parse_settings(settings, value_type))
    result = []
    for setting in settings:
        if not isinstance(setting, Setting):
            raise TypeError(f"not a setting: {setting!r}")
        result.append(Setting(setting.tag, value_type(setting.value)))
    return result