from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .query.steps import Pattern
    from .query.values import ValueKind


class TqError(Exception):
    """Base class for every error raised by tq."""


class ParseErrorKind(str, enum.Enum):
    EMPTY_IDENTIFIER = "empty identifier"
    UNEXPECTED_CHARACTER = "unexpected character"
    UNTERMINATED_QUOTE = "unterminated quote"
    UNTERMINATED_BRACKET = "unterminated bracket"
    INVALID_INDEX = "invalid index"
    TRAILING_DOT = "trailing dot"


class PatternParseError(TqError, ValueError):
    """The pattern text is not valid path syntax.

    ``offset`` is the UTF-8 byte offset of the offending position within
    ``pattern`` (the text as given, before whitespace trimming).
    """

    def __init__(self, kind: ParseErrorKind, offset: int, pattern: str) -> None:
        self.kind = kind
        self.offset = offset
        self.pattern = pattern
        super().__init__(f"invalid pattern {pattern!r}: {kind.value} at byte {offset}")

    def caret(self) -> str:
        """Render the pattern with a caret under the offending character.

        Bytes that are not valid UTF-8 are shown as U+FFFD.
        """
        raw = utf8_bytes(self.pattern)
        shown = raw.decode("utf-8", errors="replace")
        prefix = raw[: self.offset].decode("utf-8", errors="replace")
        return f"{shown}\n{' ' * len(prefix)}^ {self.kind.value}"


class NavigationError(TqError, LookupError):
    """The pattern does not match the shape of the document.

    ``path`` is the prefix of the pattern applied before the failing step.
    """

    def __init__(self, path: Pattern, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{_location(path)}: {detail}")

    def __str__(self) -> str:
        return f"{_location(self.path)}: {self.detail}"


class KeyNotFoundError(NavigationError, KeyError):
    def __init__(self, name: str, path: Pattern) -> None:
        self.name = name
        super().__init__(path, f"key `{name}` not found")


class IndexOutOfBoundsError(NavigationError, IndexError):
    def __init__(self, index: int, length: int, path: Pattern) -> None:
        self.index = index
        self.length = length
        if index < 0:
            detail = f"negative index {index} is not supported"
        else:
            detail = f"index {index} out of bounds for array of length {length}"
        super().__init__(path, detail)


class TypeMismatchError(NavigationError, TypeError):
    def __init__(self, expected: ValueKind, found: ValueKind, path: Pattern) -> None:
        self.expected = expected
        self.found = found
        super().__init__(path, f"expected {expected.value}, found {found.value}")


class ConfigError(TqError, ValueError):
    """A setting (environment variable or CLI argument) has an invalid value."""


class DocumentError(TqError, ValueError):
    """The input text cannot be read as a document."""


class UnsupportedValueError(TqError, TypeError):
    """A value in the document is not part of the document data model."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"unsupported document value of type {type(value).__name__}"
        )


def _location(path: Pattern) -> str:
    if not path.steps:
        return "at document root"
    return f"at `{path.render()}`"


def utf8_bytes(text: str) -> bytes:
    """Encode ``text`` back to the bytes it was decoded from.

    Undecodable argv bytes arrive as lone surrogates and are restored as-is.
    """
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="surrogatepass")
