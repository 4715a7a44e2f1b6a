"""Document tree helpers: field lookup and the document loader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TypeAlias

from .errors import DocumentLoadError

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = Mapping[str, JSONValue]

READ_BUFFER_SIZE = 65536


class _FieldMissing:
    """Sentinel for absent fields."""

    def __repr__(self) -> str:
        return "FIELD_MISSING"


FIELD_MISSING: _FieldMissing = _FieldMissing()


def lookup_field(container: object, key: str) -> JSONValue | _FieldMissing:
    """Return the value stored under ``key`` or ``FIELD_MISSING``.

    A container that is not an object never has fields.
    """

    if not isinstance(container, Mapping):
        return FIELD_MISSING
    if key not in container:
        return FIELD_MISSING
    return container[key]


def is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: object) -> bool:
    return is_integer(value) or isinstance(value, float)


def _read_bytes(path: Path) -> bytes:
    chunks: list[bytes] = []
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(READ_BUFFER_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def load_document(path: str | Path) -> JSONValue:
    """Read ``path`` as raw bytes and parse it as JSON.

    Raises ``DocumentLoadError`` if the file cannot be read or parsed.
    """

    path = Path(path)
    try:
        raw = _read_bytes(path)
    except OSError as exc:
        raise DocumentLoadError(str(path), exc.strerror or str(exc)) from exc

    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(str(path), str(exc)) from exc


def try_load_document(path: str | Path) -> tuple[JSONValue, bool]:
    """Like ``load_document`` but returns ``(document, ok)`` instead of raising."""

    try:
        return load_document(path), True
    except DocumentLoadError:
        return None, False


__all__ = [
    "FIELD_MISSING",
    "JSONObject",
    "JSONScalar",
    "JSONValue",
    "READ_BUFFER_SIZE",
    "is_integer",
    "is_number",
    "load_document",
    "lookup_field",
    "try_load_document",
]
