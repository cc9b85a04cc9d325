"""Source positions: byte offsets and their line/column equivalents."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple

Position = Tuple[int, int]

# A mark is recorded every this many characters within a line.
_MARK_INTERVAL = 16


@dataclass(frozen=True)
class _Mark:
    offset: int
    line: int
    column: int
    char_index: int


class SourceWithLineStarts:
    """Holds source text and maps UTF-8 byte offsets to ``(line, column)``."""

    def __init__(self, src: str) -> None:
        self.src = src
        line = 1
        column = 0
        marks: List[_Mark] = [_Mark(0, line, column, 0)]
        offset = 0
        for index, ch in enumerate(src):
            size = len(ch.encode("utf-8"))
            if ch == "\r" and src[index + 1: index + 2] == "\n":
                column += 1
            elif ch in "\r\n":
                line += 1
                column = 0
                marks.append(_Mark(offset + 1, line, column, index + 1))
            else:
                if column % _MARK_INTERVAL == 0 and column > 0:
                    marks.append(_Mark(offset, line, column, index))
                column += 1
            offset += size
        self._marks = marks
        self._offsets = [mark.offset for mark in marks]

    def get_position(self, byte_offset: int) -> Position:
        """Return ``(line, column)`` of the character at ``byte_offset``."""
        target = byte_offset + 1  # include the current character
        mark = self._marks[bisect_right(self._offsets, target) - 1]
        column = mark.column
        offset = mark.offset
        for ch in self.src[mark.char_index:]:
            if offset >= target:
                break
            column += 1
            offset += len(ch.encode("utf-8"))
        return mark.line, column


@dataclass(frozen=True)
class SourcePos:
    """Byte offsets of the start and the end of an AST node.

    ``start`` is the offset of the node's first character, ``end`` the
    offset of the first character after it.
    """

    start: int = 0
    end: int = 0

    def get_byte_offsets(self) -> Tuple[int, int]:
        """Return ``(start, end)`` byte offsets."""
        return self.start, self.end

    def get_positions(self, source_map: SourceWithLineStarts) -> Tuple[Position, Position]:
        """Return ``((line_start, column_start), (line_end, column_end))``."""
        start = source_map.get_position(self.start)
        end_offset = self.end - 1 if self.end > 0 else self.end
        return start, source_map.get_position(end_offset)

    def __repr__(self) -> str:
        return repr((self.start, self.end))