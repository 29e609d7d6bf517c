#!/usr/bin/env python3
"""
PACINSPECT SCANNER - The Cursor
-------------------------------
Walks a descriptor buffer line by line without ever copying it. A scanner
only moves forward: every line is produced exactly once per cursor.

Author: PacInspect Team
Date: 2026-10-19
"""

from typing import Iterator, Optional

from pacinspect.core.models import Line


class LineScanner:
    """
    Forward-only line cursor over an immutable text buffer.

    Blank lines and delimiter lines are produced like any other line;
    classifying them is the locator's job.
    """

    __slots__ = ("text", "_pos", "_consumed")

    def __init__(self, text: str, start: int = 0):
        self.text = text
        self._pos = start
        self._consumed = 0

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    @property
    def consumed(self) -> int:
        """Number of lines produced by this cursor so far."""
        return self._consumed

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self.text)

    def _read_at(self, pos: int) -> Optional[Line]:
        if pos >= len(self.text):
            return None
        newline = self.text.find("\n", pos)
        if newline == -1:
            newline = len(self.text)
        end = newline
        if end > pos and self.text[end - 1] == "\r":
            end -= 1
        return Line(start=pos, end=end, text=self.text[pos:end])

    def peek(self) -> Optional[Line]:
        """Returns the next line without consuming it."""
        return self._read_at(self._pos)

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        line = self._read_at(self._pos)
        if line is None:
            raise StopIteration
        # Skip past the line break, whether or not the line had a '\r'
        newline = self.text.find("\n", line.end)
        self._pos = len(self.text) if newline == -1 else newline + 1
        self._consumed += 1
        return line

    def fork(self) -> "LineScanner":
        """
        Splits off the remaining lines as an independent cursor.
        Advancing the fork never moves this scanner.
        """
        return LineScanner(self.text, self._pos)

    def remaining_text(self) -> str:
        return self.text[self._pos:]

    def __repr__(self) -> str:
        return f"LineScanner(position={self._pos}, consumed={self._consumed})"
