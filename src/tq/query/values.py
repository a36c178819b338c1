"""Document value model shared by the navigator and the serializers."""

from __future__ import annotations

import datetime
import enum
from typing import Literal, TypeAlias

from ..errors import UnsupportedValueError

Scalar: TypeAlias = str | int | float | bool | datetime.datetime | datetime.date | datetime.time
Value: TypeAlias = Scalar | list["Value"] | tuple["Value", ...] | dict[str, "Value"]
Table: TypeAlias = dict[str, Value]


class ValueKind(str, enum.Enum):
    TABLE = "table"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"

    @property
    def category(self) -> Literal["table", "array", "scalar"]:
        if self is ValueKind.TABLE:
            return "table"
        if self is ValueKind.ARRAY:
            return "array"
        return "scalar"

    @property
    def is_scalar(self) -> bool:
        return self.category == "scalar"


def value_kind(value: object) -> ValueKind:
    """Classify ``value`` into one of the closed set of document kinds.

    Raises ``UnsupportedValueError`` for objects outside the document model
    (``None`` included, since TOML has no null).
    """

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, dict):
        return ValueKind.TABLE
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return ValueKind.DATETIME
    raise UnsupportedValueError(value)


__all__ = ["Scalar", "Table", "Value", "ValueKind", "value_kind"]
