"""
tq: extract values from TOML (and JSON) documents with path patterns.

This package uses a src-layout. Import the package as `tq`.
"""

from importlib.metadata import version

__version__ = version("tq")

from .config import TQ_CONFIG, TqConfig
from .core import extract_pattern
from .errors import (
    ConfigError,
    DocumentError,
    IndexOutOfBoundsError,
    KeyNotFoundError,
    NavigationError,
    ParseErrorKind,
    PatternParseError,
    TqError,
    TypeMismatchError,
    UnsupportedValueError,
)
from .query import (
    FieldStep,
    IndexStep,
    NavigationResult,
    Pattern,
    ValueKind,
    navigate,
    parse_pattern,
    try_navigate,
)
from .runtime import configure_logging, get_logger
from .serialization import dump_value, load_document, read_input

__all__ = [
    "__version__",
    "TQ_CONFIG",
    "ConfigError",
    "DocumentError",
    "FieldStep",
    "IndexOutOfBoundsError",
    "IndexStep",
    "KeyNotFoundError",
    "NavigationError",
    "NavigationResult",
    "ParseErrorKind",
    "Pattern",
    "PatternParseError",
    "TqConfig",
    "TqError",
    "TypeMismatchError",
    "UnsupportedValueError",
    "ValueKind",
    "configure_logging",
    "dump_value",
    "extract_pattern",
    "get_logger",
    "load_document",
    "navigate",
    "parse_pattern",
    "read_input",
    "try_navigate",
]
