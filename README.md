# typeset

Building blocks for rich text layout: parsing CSS font family lists and
OpenType settings, style properties and style sets, resolving styles into
flat, non-overlapping styled byte ranges, and the metrics, ordering and
lookup helpers used once lines have been laid out.

The package has no dependencies outside the standard library.

## Installation

```
pip install typeset
```

For running the tests:

```
pip install "typeset[test]"
pytest
```

## Font families and settings (`typeset.fonts`)

```python
from typeset.fonts import parse_family_list, parse_family, GenericFamily, NamedFamily

list(parse_family_list("Arial, 'Times New Roman', serif"))
# [NamedFamily(name='Arial'), NamedFamily(name='Times New Roman'), GenericFamily.SERIF]

parse_family("'monospace'")   # NamedFamily(name='monospace'): quoting forces a named family
```

`families_of` accepts a CSS source string, a single family or a sequence of
families and returns the list of families. `parse_settings` and `settings_of`
read OpenType settings such as `"wght" 700, "liga" off` into `Setting`
objects (a four byte `tag` and a `value`); pass `int` as the value type for
features and `float` for variations. Malformed entries are skipped.

`FontStyle`, `FontWeight` and `FontWidth` describe font attributes, with
named constants such as `FontWeight.BOLD` and `FontWidth.CONDENSED`.

## Style properties (`typeset.styles`)

A `StyleProperty` pairs a `PropertyKind` with a value. `TextStyle` is a full
set of unresolved style values with their defaults (16.0 font size, 1.2 line
height, `"sans-serif"` font stack). `StyleSet` holds at most one property of
each kind:

```python
from typeset.styles import StyleSet, StyleProperty, PropertyKind

styles = StyleSet(16.0)
styles.insert(StyleProperty(PropertyKind.LINE_HEIGHT, 1.3))   # returns the replaced property, if any
styles.get(PropertyKind.FONT_SIZE).value                       # 16.0
PropertyKind.LINE_HEIGHT in styles                             # True
styles.remove(PropertyKind.LINE_HEIGHT)
```

## Resolving styles (`typeset.resolve`)

`ResolveContext` turns `StyleProperty` and `TextStyle` values into
`ResolvedProperty` and `ResolvedStyle` values. Lengths are multiplied by a
scale factor; font stacks, variations and features are interned in caches and
referred to by `Resolved` handles. Font stacks are resolved against a
`FamilyResolver`, an in-memory mapping of family names (matched without regard
to case) and generic families to integer family ids.

## Ranged styles (`typeset.ranged`)

```python
from typeset.fonts import FontWeight, GenericFamily
from typeset.ranged import RangedStyleBuilder
from typeset.resolve import FamilyResolver, ResolveContext
from typeset.styles import PropertyKind, StyleProperty

resolver = FamilyResolver({"Roboto": 1}, {GenericFamily.SANS_SERIF: [1]})
rcx = ResolveContext()

builder = RangedStyleBuilder()
builder.begin(11)
builder.push_default(rcx.resolve_property(resolver, StyleProperty(PropertyKind.FONT_SIZE, 16.0), 2.0))
builder.push(rcx.resolve_property(resolver, StyleProperty(PropertyKind.FONT_WEIGHT, FontWeight.BOLD), 1.0), 0, 5)
spans = builder.finish()
[(s.start, s.end, s.style.font_size) for s in spans]
# [(0, 5, 32.0), (5, 11, 32.0)] -- the first span is bold
```

`push` takes a byte range; `None` leaves a bound open, and ranges are clamped
to the text length. Adjacent spans with equal styles are merged.

## Nested style spans (`typeset.tree`)

`TreeStyleBuilder` collects text under nested style spans and returns the
text together with its styled byte ranges. With
`WhiteSpaceCollapse.COLLAPSE`, runs of ASCII white space become one space and
white space at the start and end of spans is trimmed.

```python
from typeset.resolve import ResolvedStyle, ResolvedProperty
from typeset.styles import PropertyKind, WhiteSpaceCollapse
from typeset.fonts import FontWeight
from typeset.tree import TreeStyleBuilder

builder = TreeStyleBuilder()
builder.begin(ResolvedStyle())
builder.white_space_collapse = WhiteSpaceCollapse.COLLAPSE
builder.push_text("  Hello   ")
builder.push_style_modification_span([ResolvedProperty(PropertyKind.FONT_WEIGHT, FontWeight.BOLD)])
builder.push_text(" world ")
text, spans = builder.finish()
text                                  # "Hello world"
[(s.start, s.end) for s in spans]     # [(0, 6), (6, 11)]
```

Popping the root span raises `RuntimeError`.

## Lines, runs and layout values

`typeset.lines` holds `RunMetrics`, `LineMetrics` and `PositionedInlineBox`,
with `logical_to_visual` and `visual_to_logical` for cluster order in left to
right and right to left runs, and `position_glyphs`, which yields copies of
glyphs placed along a baseline.

`typeset.layout` defines `Alignment` (with `Alignment.resolve` mapping `START`
and `END` to `LEFT` or `RIGHT` for a direction), `Glyph`, `Style`,
`Decoration` and `ContentWidths`, and the lookup helpers
`line_index_for_byte_index` (the line whose text range holds a byte index) and
`line_index_for_offset` (the line holding a vertical offset; boundaries belong
to the later line).

`typeset.scripts` maps script indices to ISO 15924 tags with `script_tag`, and
joins language, script and region subtags into a tag with `locale_tag`
(`locale_tag("en", None, "us")` gives `"en-US"`).

`typeset.util` has `nearly_eq` and `nearly_zero`, which compare floats within
single-precision epsilon.

## What this package does not do

It does not load or read font files, select fonts, shape text into glyphs,
find line break opportunities, break or align lines, or render anything.
There is no text editor and no command-line program. It provides the style,
metrics and ordering pieces that such a layout engine is built from.