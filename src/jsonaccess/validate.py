"""Presence and kind checks for document fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import assert_never

from .diagnostics import report
from .document import FIELD_MISSING, JSONValue, _FieldMissing, is_integer, lookup_field
from .tags import (
    BoolTag,
    CharTag,
    Float32Tag,
    Float64Tag,
    Int32Tag,
    Int64Tag,
    SignedTag,
    StringTag,
    TypeTag,
    UInt32Tag,
    UInt64Tag,
    UnsignedTag,
)

INTEGER_TAG_TYPES = (Int32Tag, UInt32Tag, Int64Tag, UInt64Tag, SignedTag, UnsignedTag)
FLOAT_TAG_TYPES = (Float32Tag, Float64Tag)
NUMERIC_TAG_TYPES = INTEGER_TAG_TYPES + FLOAT_TAG_TYPES


def resolve_field(
    container: object, key: str, tag: object
) -> JSONValue | _FieldMissing:
    """Look up ``key``, reporting a diagnostic for non-object containers."""

    if not isinstance(container, Mapping):
        report(
            "non-object-container",
            key,
            tag,
            f"container is {type(container).__name__}, not an object",
        )
        return FIELD_MISSING
    return lookup_field(container, key)


def matches_kind(value: JSONValue, tag: TypeTag) -> bool:
    """Return whether the stored ``value`` satisfies the kind policy of ``tag``."""

    if isinstance(tag, INTEGER_TAG_TYPES):
        return is_integer(value) and tag.in_range(value)  # type: ignore[arg-type]
    if isinstance(tag, BoolTag):
        return isinstance(value, bool)
    if isinstance(tag, FLOAT_TAG_TYPES):
        return isinstance(value, float)
    if isinstance(tag, (StringTag, CharTag)):
        return isinstance(value, str)
    assert_never(tag)


def is_valid(container: object, key: str, tag: TypeTag) -> bool:
    """Return whether ``key`` is present in ``container`` and matches ``tag``."""

    value = resolve_field(container, key, tag)
    if value is FIELD_MISSING:
        return False
    return matches_kind(value, tag)


def is_valid_array(container: object, key: str) -> bool:
    value = resolve_field(container, key, "array")
    return isinstance(value, list)


def is_valid_object(container: object, key: str) -> bool:
    value = resolve_field(container, key, "object")
    return isinstance(value, Mapping)


__all__ = [
    "FLOAT_TAG_TYPES",
    "INTEGER_TAG_TYPES",
    "NUMERIC_TAG_TYPES",
    "is_valid",
    "is_valid_array",
    "is_valid_object",
    "matches_kind",
    "resolve_field",
]
