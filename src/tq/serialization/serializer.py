from __future__ import annotations

import datetime
import json
import sys
import tomllib
from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.items import AoT, Array, Item, Table

from ..config import Format
from ..errors import DocumentError, UnsupportedValueError
from ..query.values import Value, value_kind
from ..runtime.logging import get_logger


def read_input(path: str | Path | None = None) -> str:
    """Read document text from ``path``, or from stdin when ``path`` is None."""

    logger = get_logger()
    if path is None:
        text = sys.stdin.read()
        logger.debug("read %d characters from stdin", len(text))
        return text

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"cannot read {path}: {exc.strerror or exc}") from exc
    logger.debug("read %d characters from %s", len(text), path)
    return text


def load_document(text: str, fmt: Format = "toml") -> dict[str, Value]:
    """Parse ``text`` into a document table.

    JSON input is held to the TOML data model: the root must be an object and
    ``null`` may not appear anywhere. Text that is not valid JSON is retried as
    TOML.
    """

    if fmt == "json":
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as json_exc:
            get_logger().debug("input is not JSON (%s); retrying as TOML", json_exc)
            try:
                return _load_toml(text)
            except DocumentError as toml_exc:
                raise DocumentError(
                    f"invalid JSON document: {json_exc}"
                ) from toml_exc
        if not isinstance(parsed, dict):
            raise DocumentError(
                f"JSON document root must be an object, got {type(parsed).__name__}"
            )
        _check_representable(parsed, "")
        return cast(dict[str, Value], parsed)

    if fmt == "toml":
        return _load_toml(text)

    raise ValueError(f"unsupported input format {fmt!r}")


def dump_value(value: Value, fmt: Format = "toml", *, pretty: bool = False) -> str:
    """Serialize an extracted value.

    Tables become TOML documents; any other value is rendered as an inline TOML
    value. JSON output is compact unless ``pretty`` is set.
    """

    if fmt == "json":
        if pretty:
            return json.dumps(value, indent=2, ensure_ascii=False, default=_json_default)
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_json_default
        )

    if fmt == "toml":
        if isinstance(value, dict):
            rendered = tomlkit.item(value)
        else:
            rendered = _inline_item(value)
        if pretty:
            _expand_arrays(rendered)
        return rendered.as_string()

    raise ValueError(f"unsupported output format {fmt!r}")


def _load_toml(text: str) -> dict[str, Value]:
    try:
        return cast(dict[str, Value], tomllib.loads(text))
    except tomllib.TOMLDecodeError as exc:
        raise DocumentError(f"invalid TOML document: {exc}") from exc


def _check_representable(value: Any, where: str) -> None:
    if value is None:
        raise DocumentError(
            f"null at `{where or '<root>'}` cannot be represented in a TOML document"
        )
    if isinstance(value, dict):
        for key, child in value.items():
            _check_representable(child, f"{where}.{key}" if where else key)
    elif isinstance(value, list):
        for index, child in enumerate(value):
            _check_representable(child, f"{where}[{index}]")


def _json_default(value: object) -> str:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    raise UnsupportedValueError(value)


def _inline_item(value: Value) -> Item:
    if isinstance(value, dict):
        table = tomlkit.inline_table()
        for key, child in value.items():
            table.append(key, _inline_item(child))
        return table
    if isinstance(value, (list, tuple)):
        array = tomlkit.array()
        for child in value:
            array.append(_inline_item(child))
        return array
    value_kind(value)
    return tomlkit.item(value)


def _expand_arrays(item: Item) -> None:
    # only the outermost array is split; nested arrays stay inline
    if isinstance(item, Array):
        if len(item) > 0:
            item.multiline(True)
    elif isinstance(item, Table):
        for child in item.values():
            _expand_arrays(child)
    elif isinstance(item, AoT):
        for table in item.body:
            _expand_arrays(table)
