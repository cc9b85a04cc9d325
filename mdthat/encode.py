"""Percent-encoding that leaves existing escape sequences intact."""

from __future__ import annotations

import re

from .asciiset import AsciiSet

# Same characters that encodeURI leaves alone (besides A-Za-z0-9).
ENCODE_DEFAULT_CHARS = AsciiSet.from_chars(";/?:@&=+$,-_.!~*'()#")
# Same characters that encodeURIComponent leaves alone (besides A-Za-z0-9).
ENCODE_COMPONENT_CHARS = AsciiSet.from_chars("-_.!~*'()")

_ESCAPE_OR_BYTE = re.compile(rb"%[0-9A-Fa-f]{2}|.", re.DOTALL)
_BYTE = re.compile(rb".", re.DOTALL)


def encode(string: str, exclude: AsciiSet, keep_escaped: bool = True) -> str:
    """Percent-encode unsafe characters, e.g. ``&`` -> ``%26``.

    Characters in ``exclude`` and ``A-Za-z0-9`` are kept as is. With
    ``keep_escaped``, a ``%`` that starts a valid escape sequence is kept.
    """
    allowed = exclude.add_alphanumeric()
    pattern = _ESCAPE_OR_BYTE if keep_escaped else _BYTE

    def replace(match: re.Match) -> bytes:
        chunk = match.group()
        if len(chunk) == 3:
            return chunk
        byte = chunk[0]
        if byte < 0x80 and allowed.has(byte):
            return chunk
        return b"%%%02X" % byte

    return pattern.sub(replace, string.encode("utf-8")).decode("ascii")