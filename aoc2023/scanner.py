"""Cursor-based scanning of puzzle input lines."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT64_MAX = 2**63 - 1


class AocError(Exception):
    """Raised when puzzle input does not have the expected shape."""


class Scanner:
    """A read cursor over a single line of text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or an empty string at the end."""
        return "" if self.at_end() else self.text[self.pos]

    def advance(self) -> bool:
        """Move one character forward; False if already at the end."""
        if self.at_end():
            return False
        self.pos += 1
        return True

    def rest(self) -> str:
        return self.text[self.pos:]

    def read_int(self, signed: bool = True) -> int | None:
        """Consume an integer; None if nothing was consumed."""
        start = self.pos
        sign = 1
        if signed and self.peek() == "-":
            sign = -1
            self.pos += 1
        value = 0
        while self.peek() in _DIGITS:
            new_value = value * 10 + int(self.text[self.pos])
            if new_value > _INT64_MAX:
                raise AocError(f"Overflow parsing {value}: {new_value}")
            value = new_value
            self.pos += 1
        if self.pos == start:
            return None
        return sign * value

    def expect_int(self, signed: bool = True) -> int:
        value = self.read_int(signed)
        if value is None:
            raise AocError(f"Failed to parse int: '{self.rest()}'")
        return value

    def read_ints(self) -> list[int]:
        """Consume whitespace-separated integers for as long as they follow."""
        values = []
        while True:
            self.skip_whitespace()
            value = self.read_int()
            if value is None:
                return values
            values.append(value)

    def skip_until(self, char: str) -> int:
        """Skip up to and including ``char``; return the number of characters skipped."""
        start = self.pos
        while not self.at_end() and self.peek() != char:
            self.pos += 1
        self.advance()
        return self.pos - start

    def skip_whitespace(self) -> int:
        start = self.pos
        while self.peek() in _WHITESPACE:
            self.pos += 1
        return self.pos - start

    def take(self, n: int) -> str:
        """Consume and return up to ``n`` characters."""
        chunk = self.text[self.pos:self.pos + n]
        self.pos += len(chunk)
        return chunk

    def skip_char(self, char: str) -> bool:
        if self.peek() == char:
            return self.advance()
        return False

    def skip_prefix(self, prefix: str) -> int:
        """Consume ``prefix`` if it follows; return its length, else 0."""
        if self.text.startswith(prefix, self.pos):
            self.pos += len(prefix)
            return len(prefix)
        return 0

    def expect(self, prefix: str) -> int:
        consumed = self.skip_prefix(prefix)
        if consumed == 0:
            raise AocError(f"Failed to read prefix '{prefix}': '{self.rest()}'")
        return consumed