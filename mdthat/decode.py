"""Percent-decoding that tolerates invalid input."""

from __future__ import annotations

import re

from .asciiset import AsciiSet

# Same characters that decodeURI leaves encoded.
DECODE_DEFAULT_CHARS = AsciiSet.from_chars(";/?:@&=+$,#")
# decodeURIComponent decodes everything.
DECODE_COMPONENT_CHARS = AsciiSet.from_chars("")

_URLENCODED_SEQUENCE = re.compile(r"(?:%[a-fA-F0-9]{2})+")


def decode(string: str, exclude: AsciiSet) -> str:
    """Decode percent-encoded characters, e.g. ``%26`` -> ``&``.

    ASCII characters in ``exclude`` stay encoded; invalid UTF-8 is
    replaced with U+FFFD.
    """

    def replace(match: re.Match) -> str:
        result = bytearray()
        for hex_pair in match.group()[1:].split("%"):
            value = int(hex_pair, 16)
            if value < 0x80 and exclude.has(value):
                result += b"%" + hex_pair.encode("ascii")
            else:
                result.append(value)
        return result.decode("utf-8", "replace")

    return _URLENCODED_SEQUENCE.sub(replace, string)