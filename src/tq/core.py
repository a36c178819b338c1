from __future__ import annotations

from .query.navigate import navigate
from .query.parser import parse_pattern
from .query.values import Value


def extract_pattern(document: Value, pattern_text: str) -> Value:
    """Select the sub-value of ``document`` addressed by ``pattern_text``.

    Raises ``PatternParseError`` for malformed patterns and a
    ``NavigationError`` subclass when the document does not have the shape the
    pattern asks for. The result is the object stored in ``document``.
    """

    return navigate(document, parse_pattern(pattern_text))


__all__ = ["extract_pattern"]
