from .navigate import NavigationResult, navigate, try_navigate
from .parser import parse_pattern
from .steps import FieldStep, IndexStep, Pattern, Step
from .values import Scalar, Table, Value, ValueKind, value_kind

__all__ = [
    "FieldStep",
    "IndexStep",
    "NavigationResult",
    "Pattern",
    "Scalar",
    "Step",
    "Table",
    "Value",
    "ValueKind",
    "navigate",
    "parse_pattern",
    "try_navigate",
    "value_kind",
]
