"""Hierarchical, tree based style application."""

from __future__ import annotations

import copy
import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .resolve import RangedStyle, ResolvedProperty, ResolvedStyle
from .styles import WhiteSpaceCollapse

_ASCII_WHITESPACE = " \t\n\r\x0c"
_ASCII_WHITESPACE_RUN = re.compile(r"[ \t\n\r\x0c]+")


class ItemKind(enum.Enum):
    """The kind of the item most recently added to the text."""

    NONE = "none"
    INLINE_BOX = "inline_box"
    TEXT_RUN = "text_run"


@dataclass
class _StyleTreeNode:
    parent: Optional[int]
    style: ResolvedStyle


class TreeStyleBuilder:
    """Builds flat styled ranges and text from nested style spans."""

    def __init__(self) -> None:
        self._tree: list[_StyleTreeNode] = []
        self._styles: list[RangedStyle] = []
        self.white_space_collapse = WhiteSpaceCollapse.PRESERVE
        self._text = ""
        self._text_bytes = 0
        self._uncommitted: list[str] = []
        self._current_span: Optional[int] = None
        self.is_span_first = False
        self.last_item_kind = ItemKind.NONE

    def begin(self, root_style: ResolvedStyle) -> None:
        """Start a new tree whose root span has ``root_style``."""
        self._tree = [_StyleTreeNode(None, root_style)]
        self._styles = []
        self.white_space_collapse = WhiteSpaceCollapse.PRESERVE
        self._text = ""
        self._text_bytes = 0
        self._uncommitted = []
        self._current_span = 0
        self.is_span_first = True

    def _node(self) -> _StyleTreeNode:
        if self._current_span is None:
            raise RuntimeError("begin() must be called first")
        return self._tree[self._current_span]

    def _current_style(self) -> ResolvedStyle:
        return copy.copy(self._node().style)

    @property
    def current_text_len(self) -> int:
        """Length in bytes of the text committed so far."""
        return self._text_bytes

    def _collapse(self, text: str, is_span_last: bool) -> str:
        if self.is_span_first or (
            self.last_item_kind is ItemKind.TEXT_RUN
            and self._text
            and self._text[-1] in _ASCII_WHITESPACE
        ):
            text = text.lstrip()
        if is_span_last:
            text = text.rstrip()
        return _ASCII_WHITESPACE_RUN.sub(" ", text)

    def push_uncommitted_text(self, is_span_last: bool) -> None:
        """Commit pending text under the current span's style."""
        style = self._current_style()
        span_text = "".join(self._uncommitted)
        self._uncommitted = []
        if self.white_space_collapse is WhiteSpaceCollapse.COLLAPSE:
            span_text = self._collapse(span_text, is_span_last)
        if not span_text:
            return
        start = self._text_bytes
        self._text_bytes += len(span_text.encode("utf-8"))
        self._styles.append(RangedStyle(style, start, self._text_bytes))
        self._text += span_text
        self.is_span_first = False
        self.last_item_kind = ItemKind.TEXT_RUN

    def push_style_span(self, style: ResolvedStyle) -> None:
        """Open a child span with ``style``."""
        self.push_uncommitted_text(False)
        self._tree.append(_StyleTreeNode(self._current_span, style))
        self._current_span = len(self._tree) - 1
        self.is_span_first = True

    def push_style_modification_span(self, properties: Iterable[ResolvedProperty]) -> None:
        """Open a child span whose style is the current one with ``properties`` applied."""
        style = self._current_style()
        for prop in properties:
            style.apply(prop)
        self.push_style_span(style)

    def pop_style_span(self) -> None:
        """Close the current span; closing the root raises RuntimeError."""
        self.push_uncommitted_text(True)
        parent = self._node().parent
        if parent is None:
            raise RuntimeError("popped root style")
        self._current_span = parent

    def push_text(self, text: str) -> None:
        """Add text to the current span."""
        if text:
            self._uncommitted.append(text)

    def finish(self) -> tuple[str, list[RangedStyle]]:
        """Close all open spans and return the text and its styled ranges."""
        while self._node().parent is not None:
            self.pop_style_span()
        self.push_uncommitted_text(True)
        text = self._text
        self._text = ""
        self._text_bytes = 0
        return text, list(self._styles)