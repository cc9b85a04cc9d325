"""Helpers shared by parser rules: entities, escaping, indentation."""

from __future__ import annotations

import re
import unicodedata
from html.entities import html5
from typing import Dict, Optional, Tuple

_UNESCAPE_MD_RE = r"\\([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])"
_ENTITY_RE = r"&([A-Za-z#][A-Za-z0-9]{1,31});"

_DIGITAL_ENTITY_RE = re.compile(r"&#(x[a-f0-9]{1,8}|[0-9]{1,8});", re.IGNORECASE)
_UNESCAPE_ALL_RE = re.compile(f"{_UNESCAPE_MD_RE}|{_ENTITY_RE}")
_SPACE_RE = re.compile(r"\s+")

# Only named entities that end with ";" are recognised.
_ENTITIES: Dict[str, str] = {
    f"&{name}": chars for name, chars in html5.items() if name.endswith(";")
}

_HTML_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def is_valid_entity_code(code: int) -> bool:
    """Check whether a code from ``&#xHHHH;`` is a character safe to render.

    Surrogates, non-characters, most control codes and out-of-range values
    are rejected.
    """
    if 0xD800 <= code <= 0xDFFF:
        return False
    if 0xFDD0 <= code <= 0xFDEF:
        return False
    if (code & 0xFFFF) in (0xFFFF, 0xFFFE):
        return False
    if code <= 0x08 or code == 0x0B:
        return False
    if 0x0E <= code <= 0x1F:
        return False
    if 0x7F <= code <= 0x9F:
        return False
    return code <= 0x10FFFF


def get_entity_from_str(text: str) -> Optional[str]:
    """Return the characters a named entity such as ``&amp;`` stands for, or None."""
    return _ENTITIES.get(text)


def replace_entity_pattern(text: str) -> Optional[str]:
    """Resolve a named or numeric entity like ``&euro;`` or ``&#x2014;``, or return None."""
    entity = get_entity_from_str(text)
    if entity is not None:
        return entity
    match = _DIGITAL_ENTITY_RE.fullmatch(text)
    if match is None:
        return None
    digits = match.group(1)
    if digits[0] in "xX":
        code = int(digits[1:], 16)
    else:
        code = int(digits, 10)
    return chr(code) if is_valid_entity_code(code) else None


def unescape_all(text: str) -> str:
    """Unescape both entities (``&quot;`` -> ``"``) and backslash escapes (``\\"`` -> ``"``)."""
    if "\\" not in text and "&" not in text:
        return text

    def replace(match: re.Match) -> str:
        escaped = match.group(1)
        if escaped is not None:
            return escaped
        whole = match.group(0)
        replacement = replace_entity_pattern(whole)
        return whole if replacement is None else replacement

    return _UNESCAPE_ALL_RE.sub(replace, text)


def escape_html(text: str) -> str:
    """Escape ``& < > "`` with the corresponding HTML entities."""
    return text.translate(_HTML_ESCAPES)


def normalize_reference(text: str) -> str:
    """Fold case and collapse whitespace so equivalent reference labels compare equal.

    Lowercasing and then uppercasing normalises letters that have several
    case variants (e.g. Greek theta symbols).
    """
    collapsed = _SPACE_RE.sub(" ", text.strip())
    return collapsed.lower().upper()


def rfind_and_count(source: str, char: str) -> int:
    """Count characters after the last occurrence of ``char``, or all of them if absent."""
    last = source.rfind(char)
    return len(source) if last < 0 else len(source) - last - 1


def find_indent_of(line: str, pos: int) -> Tuple[int, int]:
    """Measure indentation from ``pos`` to the first non-space character.

    Tabs expand to a tabstop of 4. Returns ``(indent, position)`` where
    position is the index of the first non-space character.
    """
    indent = 0
    for ch in line[pos:]:
        if ch == "\t":
            indent += 4 - rfind_and_count(line[:pos], "\t") % 4
        elif ch == " ":
            indent += 1
        else:
            break
        pos += 1
    return indent, pos


def calc_right_whitespace_with_tabstops(source: str, indent: int) -> Tuple[int, int]:
    """Find the tail of ``source`` spanning ``indent`` columns (tabstop 4).

    Returns ``(spaces, start)``: the number of spaces to prepend when a tab
    is split, and the index where the kept tail of ``source`` begins.
    """
    start = len(source)
    chars = reversed(list(enumerate(source)))
    while indent > 0:
        entry = next(chars, None)
        if entry is None:
            start = 0
            break
        pos, ch = entry
        if ch == "\t":
            # The preceding tab always ends on a tabstop, so count from there.
            tab_width = 4 - rfind_and_count(source[:pos], "\t") % 4
            if indent < tab_width:
                return indent, start
            indent -= tab_width
        else:
            indent -= 1
        start = pos
    return 0, start


def cut_right_whitespace_with_tabstops(source: str, indent: int) -> str:
    """Return the trailing part of ``source`` that is ``indent`` columns wide.

    A tab split by the cut is replaced with the spaces it still covers.
    """
    spaces, start = calc_right_whitespace_with_tabstops(source, indent)
    return " " * spaces + source[start:]


def is_punct_char(ch: str) -> bool:
    """Check whether ``ch`` is in a Unicode punctuation category (P*)."""
    return unicodedata.category(ch).startswith("P")