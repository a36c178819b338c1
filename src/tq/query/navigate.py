"""Walk parsed patterns through document trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import cast

from ..errors import (
    IndexOutOfBoundsError,
    KeyNotFoundError,
    NavigationError,
    TypeMismatchError,
)
from .steps import FieldStep, IndexStep, Pattern
from .values import Value, ValueKind, value_kind


def navigate(root: Value, pattern: Pattern) -> Value:
    """Return the value selected by ``pattern`` inside ``root``.

    The returned object is the one stored in the document, not a copy. Each
    step narrows to exactly one child; the first step that cannot be applied
    raises a ``NavigationError`` whose ``path`` is the prefix of ``pattern``
    applied so far.
    """

    current = root
    for position, step in enumerate(pattern.steps):
        kind = value_kind(current)

        if isinstance(step, FieldStep):
            if kind is not ValueKind.TABLE:
                raise TypeMismatchError(
                    ValueKind.TABLE, kind, pattern.prefix(position)
                )
            table = cast(dict[str, Value], current)
            if step.name not in table:
                raise KeyNotFoundError(step.name, pattern.prefix(position))
            current = table[step.name]
            continue

        if isinstance(step, IndexStep):
            if kind is not ValueKind.ARRAY:
                raise TypeMismatchError(
                    ValueKind.ARRAY, kind, pattern.prefix(position)
                )
            array = cast(Sequence[Value], current)
            if not 0 <= step.index < len(array):
                raise IndexOutOfBoundsError(
                    step.index, len(array), pattern.prefix(position)
                )
            current = array[step.index]
            continue

        raise TypeError(f"unknown pattern step {step!r}")

    return current


@dataclass(frozen=True)
class NavigationResult:
    value: Value | None = None
    error: NavigationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Value:
        if self.error is not None:
            raise self.error
        return cast(Value, self.value)


def try_navigate(root: Value, pattern: Pattern) -> NavigationResult:
    """Like ``navigate`` but report failures as a ``NavigationResult``."""

    try:
        return NavigationResult(value=navigate(root, pattern))
    except NavigationError as exc:
        return NavigationResult(error=exc)


__all__ = ["NavigationResult", "navigate", "try_navigate"]
