"""End-to-end tests for pattern extraction."""

import pytest

import tq
from tq import (
    IndexOutOfBoundsError,
    KeyNotFoundError,
    PatternParseError,
    TqError,
    TypeMismatchError,
    extract_pattern,
    load_document,
)

CARGO = """
[package]
name = "tq"
version = "0.1.4"
keywords = ["toml", "cli"]

[dependencies]
serde = { version = "1", features = ["derive"] }

[[bin]]
name = "tq"
path = "src/bin/tq.rs"
"""


def test_empty_pattern_returns_document_unchanged() -> None:
    doc = load_document(CARGO)

    assert extract_pattern(doc, "") is doc


def test_simple_field() -> None:
    assert extract_pattern({"a": {"b": 5}}, "a.b") == 5


def test_array_indexing() -> None:
    doc = {"a": [10, 20, 30]}

    assert extract_pattern(doc, "a[1]") == 20
    with pytest.raises(IndexOutOfBoundsError) as excinfo:
        extract_pattern(doc, "a[3]")
    assert (excinfo.value.index, excinfo.value.length) == (3, 3)


def test_missing_key() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        extract_pattern({"a": {}}, "a.b")

    assert excinfo.value.name == "b"
    assert excinfo.value.path.render() == "a"


def test_type_mismatch_on_scalar() -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        extract_pattern({"a": 5}, "a.b")

    assert excinfo.value.expected is tq.ValueKind.TABLE
    assert excinfo.value.found.is_scalar


def test_malformed_pattern_fails_before_navigation() -> None:
    with pytest.raises(PatternParseError):
        extract_pattern({}, "a[")


def test_extract_from_loaded_toml() -> None:
    doc = load_document(CARGO)

    assert extract_pattern(doc, "package.keywords[1]") == "cli"
    assert extract_pattern(doc, "dependencies.serde.features") == ["derive"]
    assert extract_pattern(doc, "bin[0].path") == "src/bin/tq.rs"
    assert extract_pattern(doc, "package") == {
        "name": "tq",
        "version": "0.1.4",
        "keywords": ["toml", "cli"],
    }


def test_all_failures_share_base_error() -> None:
    for pattern in ("a[", "missing", "package.name.x", "bin[9]"):
        with pytest.raises(TqError):
            extract_pattern(load_document(CARGO), pattern)
