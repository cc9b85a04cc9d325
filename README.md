# mdthat

Building blocks for Markdown processors. Each piece can be used on its own:

- **Percent-encoding** that leaves valid escape sequences alone
  (`mdthat.encode.encode`, `mdthat.decode.decode`, `mdthat.asciiset.AsciiSet`).
- **A lenient URL parser** that never fails and loses no information
  (`mdthat.urlparse.parse_url`, returning a `Url`).
- **A rule chain with dependency ordering** (`mdthat.ruler.Ruler`).
- **Source maps** that turn UTF-8 byte offsets into line and column numbers
  (`mdthat.sourcemap.SourceWithLineStarts`, `mdthat.sourcemap.SourcePos`).
- **Text helpers** for entities, escapes, reference labels and tab-aware
  indentation (`mdthat.utils`).
- **Type keys** that compare by type and print as the type's name
  (`mdthat.typekey.TypeKey`).

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install mdthat
```

## Percent-encoding

```python
from mdthat.asciiset import AsciiSet
from mdthat.encode import encode, ENCODE_DEFAULT_CHARS
from mdthat.decode import decode, DECODE_DEFAULT_CHARS

encode("[hello]", ENCODE_DEFAULT_CHARS)         # '%5Bhello%5D'
encode("%20%2G", ENCODE_DEFAULT_CHARS, True)    # '%20%252G'  (valid escapes kept)
encode("%20%2G", ENCODE_DEFAULT_CHARS, False)   # '%2520%252G'

decode("%5Bhello%5D", DECODE_DEFAULT_CHARS)     # '[hello]'
decode("%20%25%20", AsciiSet.from_chars("%"))   # ' %25 '
```

`encode` keeps `A-Za-z0-9` and the characters of the given set, and
percent-encodes every other byte of the UTF-8 text. `decode` leaves ASCII
characters of the given set encoded and replaces invalid UTF-8 with U+FFFD.
`ENCODE_COMPONENT_CHARS` and `DECODE_COMPONENT_CHARS` give the narrower
component sets.

An `AsciiSet` is immutable: `add`, `remove` and `add_alphanumeric` return a
new set, and `has` checks membership. Characters may be given as ints or
one-character strings; anything outside `0x00..0x7f` raises `ValueError`.

## Parsing URLs

```python
from mdthat.urlparse import parse_url

u = parse_url("https://www.reddit.com/r/programming/?utm_source=reddit")
u.protocol   # 'https:'
u.slashes    # True
u.hostname   # 'www.reddit.com'
u.pathname   # '/r/programming/'
u.search     # '?utm_source=reddit'
```

A `Url` is a dataclass with the fields `protocol`, `slashes`, `auth`, `port`,
`hostname`, `hash`, `search` and `pathname`; absent parts are `None`. Nothing
is normalised: case, punycode and escapes stay as written. Backslashes are not
turned into slashes, and no leading slash is added to paths.

## Ordering rules

```python
from mdthat.ruler import Ruler

chain = Ruler()
chain.add("hello", "hello")
chain.add("world", "world")
chain.add("open", "[ ").before("hello")
chain.add("close", " ]").after("world")
chain.add("comma", ", ").after("hello").before("world")
chain.add("bang", "!").require("world").after("world").before_all()

"".join(chain)   # '[ hello, world! ]'
```

`RuleItem` methods (`before`, `after`, `before_all`, `after_all`, `alias`,
`require`) return the item, so they chain. `Ruler.compile()` returns the values
in order; `remove` and `contains` work by mark. A cycle raises
`CyclicDependencyError`; an unmet `require` raises `MissingDependencyError`.

## Source positions

```python
from mdthat.sourcemap import SourceWithLineStarts, SourcePos

source_map = SourceWithLineStarts("123\n456")
SourcePos(5, 6).get_positions(source_map)   # ((2, 2), (2, 2))
SourcePos(5, 6).get_byte_offsets()          # (5, 6)
```

## Text helpers

```python
from mdthat.utils import (
    unescape_all, escape_html, normalize_reference,
    find_indent_of, cut_right_whitespace_with_tabstops,
)

unescape_all("&#74;avascript")               # 'Javascript'
escape_html('&"')                            # '&amp;&quot;'
normalize_reference("Foo   Bar") == normalize_reference("foo bar")   # True
find_indent_of("\tfoo", 0)                   # (4, 1)
cut_right_whitespace_with_tabstops("\t\t", 6)   # '  \t'
```

`mdthat.utils` also has `is_valid_entity_code`, `get_entity_from_str`,
`replace_entity_pattern`, `rfind_and_count`,
`calc_right_whitespace_with_tabstops` and `is_punct_char`.

## What this package does not do

It does not parse Markdown or render HTML; it only supplies pieces a parser
can be built from. It also has no URL formatting: `Url` objects are not turned
back into strings, hostnames are not punycode-encoded or decoded, and long
URLs are not shortened for display. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```