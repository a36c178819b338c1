"""Parse textual path patterns into step sequences.

Grammar::

    pattern    := step ('.' step)*
    step       := identifier ('[' integer ']')*
    identifier := bare-key | quoted-key
    bare-key   := [A-Za-z0-9_-]+
    quoted-key := '"' ... '"'
    integer    := '-'? digit+

Inside a quoted key ``\\"`` and ``\\\\`` are escapes; everything else is taken
literally. Whitespace around the whole pattern is ignored, whitespace anywhere
else is a syntax error unless quoted.
"""

from __future__ import annotations

import re

from ..errors import ParseErrorKind, PatternParseError, utf8_bytes
from .steps import FieldStep, IndexStep, Pattern, Step

_BARE_KEY_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
)
_INDEX = re.compile(r"-?[0-9]+")
_INDEX_PREFIX = re.compile(r"-?[0-9]*")


def parse_pattern(text: str) -> Pattern:
    """Parse ``text`` into a ``Pattern``.

    Raises ``PatternParseError`` on the first syntax error; offsets are UTF-8
    byte offsets into ``text`` as given.
    """

    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())
    if start >= end:
        return Pattern()
    return Pattern(steps=tuple(_Scanner(text, start, end).steps()))


class _Scanner:
    def __init__(self, text: str, start: int, end: int) -> None:
        self.text = text
        self.pos = start
        self.end = end

    def peek(self) -> str | None:
        if self.pos >= self.end:
            return None
        return self.text[self.pos]

    def fail(self, kind: ParseErrorKind, pos: int) -> PatternParseError:
        offset = len(utf8_bytes(self.text[:pos]))
        return PatternParseError(kind, offset, self.text)

    def steps(self) -> list[Step]:
        steps: list[Step] = []
        while True:
            steps.append(FieldStep(name=self.identifier()))
            while self.peek() == "[":
                steps.append(IndexStep(index=self.index()))

            char = self.peek()
            if char is None:
                return steps
            if char != ".":
                raise self.fail(ParseErrorKind.UNEXPECTED_CHARACTER, self.pos)
            self.pos += 1
            if self.peek() is None:
                raise self.fail(ParseErrorKind.TRAILING_DOT, self.pos - 1)

    def identifier(self) -> str:
        if self.peek() == '"':
            return self.quoted_key()

        begin = self.pos
        while (char := self.peek()) is not None and char in _BARE_KEY_CHARS:
            self.pos += 1
        if self.pos > begin:
            return self.text[begin : self.pos]

        if self.peek() in (None, ".", "["):
            raise self.fail(ParseErrorKind.EMPTY_IDENTIFIER, self.pos)
        raise self.fail(ParseErrorKind.UNEXPECTED_CHARACTER, self.pos)

    def quoted_key(self) -> str:
        opening = self.pos
        self.pos += 1
        chars: list[str] = []
        while True:
            char = self.peek()
            if char is None:
                raise self.fail(ParseErrorKind.UNTERMINATED_QUOTE, opening)
            self.pos += 1
            if char == '"':
                return "".join(chars)
            if char == "\\":
                escaped = self.peek()
                if escaped in ('"', "\\"):
                    chars.append(escaped)
                    self.pos += 1
                    continue
            chars.append(char)

    def index(self) -> int:
        opening = self.pos
        close = self.text.find("]", opening + 1, self.end)
        if close == -1:
            raise self.fail(ParseErrorKind.UNTERMINATED_BRACKET, opening)

        token = self.text[opening + 1 : close]
        if not _INDEX.fullmatch(token):
            bad = _INDEX_PREFIX.match(token)
            assert bad is not None
            raise self.fail(ParseErrorKind.INVALID_INDEX, opening + 1 + bad.end())

        self.pos = close + 1
        return int(token)


__all__ = ["parse_pattern"]
