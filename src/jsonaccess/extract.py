"""Typed field extraction with caller-supplied defaults."""

from __future__ import annotations

from typing import TypeVar, overload

from .diagnostics import report
from .document import FIELD_MISSING, JSONValue, is_number
from .numbers import narrow_to_float32
from .tags import (
    INT32,
    BoolTag,
    Float32Tag,
    FloatTag,
    IntegerTag,
    TextTag,
    TypeTag,
    infer_tag,
)
from .validate import NUMERIC_TAG_TYPES, matches_kind, resolve_field

D = TypeVar("D")


def resolve_tag(key: str, default: object, tag: TypeTag | None) -> TypeTag:
    """Return ``tag`` or infer it from ``default``."""

    if tag is not None:
        return tag
    inferred = infer_tag(default)
    if inferred is INT32 and not isinstance(default, bool):
        report(
            "implicit-int32",
            key,
            inferred,
            "tag inferred from an int default; pass tag= for wider or unsigned fields",
        )
    return inferred


def read_value(key: str, value: JSONValue, default: D, tag: TypeTag) -> object:
    """Convert a present ``value`` according to ``tag`` or fall back to ``default``."""

    if matches_kind(value, tag):
        if isinstance(tag, Float32Tag):
            return narrow_to_float32(value)  # type: ignore[arg-type]
        return value

    if isinstance(tag, NUMERIC_TAG_TYPES) and is_number(value):
        report(
            "numeric-subkind-mismatch",
            key,
            tag,
            f"stored {type(value).__name__} {value!r} does not fit {tag}",
        )
    return default


@overload
def extract(container: object, key: str, default: D, tag: IntegerTag) -> int | D: ...


@overload
def extract(container: object, key: str, default: D, tag: FloatTag) -> float | D: ...


@overload
def extract(container: object, key: str, default: D, tag: BoolTag) -> bool | D: ...


@overload
def extract(container: object, key: str, default: D, tag: TextTag) -> str | D: ...


@overload
def extract(container: object, key: str, default: D, tag: None = None) -> D: ...


def extract(
    container: object, key: str, default: D, tag: TypeTag | None = None
) -> object:
    """Return the field ``key`` of ``container`` read as ``tag``.

    Returns ``default`` when the key is absent or the stored kind does not
    match ``tag``. When ``tag`` is omitted it is inferred from ``default``;
    an ``int`` default infers ``INT32``.
    """

    tag = resolve_tag(key, default, tag)
    value = resolve_field(container, key, tag)
    if value is FIELD_MISSING:
        return default
    return read_value(key, value, default, tag)


__all__ = ["extract", "read_value", "resolve_tag"]
