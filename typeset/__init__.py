"""Font family parsing, style resolution and line metrics helpers for rich text layout."""

__version__ = "0.1.0"

__all__ = [
    "fonts",
    "layout",
    "lines",
    "ranged",
    "resolve",
    "scripts",
    "styles",
    "tree",
    "util",
]