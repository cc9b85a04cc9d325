"""A compact set of ASCII characters, stored as a 128-bit mask."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

CharLike = Union[int, str]

_ALPHANUMERIC_MASK = 0x07FFFFFE07FFFFFE03FF000000000000


def _code(byte: CharLike) -> int:
    """Return the code of an ASCII character given as an int or a one-char string."""
    code = ord(byte) if isinstance(byte, str) else int(byte)
    if not 0 <= code <= 0x7F:
        raise ValueError(f"character {byte!r} is outside the ASCII range")
    return code


@dataclass(frozen=True)
class AsciiSet:
    """Immutable set of characters in the range 0x00..0x7f."""

    bits: int = 0

    @classmethod
    def from_chars(cls, chars: Union[str, bytes, Iterable[CharLike]]) -> AsciiSet:
        """Build a set holding every character of ``chars``.

        Raises ValueError if any character is outside the ASCII range.
        """
        result = cls()
        for ch in chars:
            result = result.add(ch)
        return result

    def add(self, byte: CharLike) -> AsciiSet:
        """Return a new set with ``byte`` added."""
        return AsciiSet(self.bits | (1 << _code(byte)))

    def remove(self, byte: CharLike) -> AsciiSet:
        """Return a new set with ``byte`` removed."""
        return AsciiSet(self.bits & ~(1 << _code(byte)))

    def add_alphanumeric(self) -> AsciiSet:
        """Return a new set with ``A-Za-z0-9`` added."""
        return AsciiSet(self.bits | _ALPHANUMERIC_MASK)

    def has(self, byte: CharLike) -> bool:
        """Check whether ``byte`` is in the set."""
        return bool(self.bits & (1 << _code(byte)))