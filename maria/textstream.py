"""Whitespace-delimited reading of saved game text."""

from __future__ import annotations

import re

_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT = re.compile(r"[+-]?\d+")
_SPACE = re.compile(r"\s*")


class TextReader:
    """Reads numbers, single characters and lines from a block of text.

    Numbers skip leading whitespace and stop at the first character that
    cannot continue them; lines run up to and consume the next newline.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._pos >= len(self._text)

    def _token(self, pattern: re.Pattern[str], kind: str) -> str:
        self._pos = _SPACE.match(self._text, self._pos).end()
        if self.at_end:
            raise EOFError(f"expected {kind}, found end of input")
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {kind} at offset {self._pos}")
        self._pos = match.end()
        return match.group()

    def read_float(self) -> float:
        """Read the next floating point number."""
        return float(self._token(_FLOAT, "a number"))

    def read_int(self) -> int:
        """Read the next integer."""
        return int(self._token(_INT, "an integer"))

    def read_line(self) -> str:
        """Read the rest of the current line, consuming its newline."""
        if self.at_end:
            raise EOFError("expected a line, found end of input")
        end = self._text.find("\n", self._pos)
        if end < 0:
            line = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos:end]
            self._pos = end + 1
        return line

    def ignore(self) -> None:
        """Skip a single character, if any remain."""
        if not self.at_end:
            self._pos += 1