"""Extraction that also accepts numbers serialized as text."""

from __future__ import annotations

from typing import TypeVar, overload

from .diagnostics import report
from .document import FIELD_MISSING, is_number
from .errors import UnsupportedCoercionTagError
from .extract import read_value, resolve_tag
from .numbers import ParsedNumber, parse_float, parse_int
from .tags import FloatTag, IntegerTag, NumericTag, SignedTag, UnsignedTag
from .validate import FLOAT_TAG_TYPES, NUMERIC_TAG_TYPES, resolve_field

D = TypeVar("D")


def _parse_text(text: str, tag: NumericTag) -> ParsedNumber:
    if isinstance(tag, FLOAT_TAG_TYPES):
        return parse_float(text, tag)  # type: ignore[arg-type]
    return parse_int(text, tag)  # type: ignore[arg-type]


@overload
def extract_from_numeric_or_string(
    container: object, key: str, default: D, tag: IntegerTag
) -> int | D: ...


@overload
def extract_from_numeric_or_string(
    container: object, key: str, default: D, tag: FloatTag
) -> float | D: ...


@overload
def extract_from_numeric_or_string(
    container: object, key: str, default: D, tag: None = None
) -> D: ...


def extract_from_numeric_or_string(
    container: object, key: str, default: D, tag: NumericTag | None = None
) -> object:
    """Like ``extract`` for numeric tags, but also parses text fields.

    Text is parsed as a base-10 prefix: ``"42px"`` reads as ``42``. Text with
    no numeric prefix, or a literal out of range for ``tag``, yields
    ``default``. The generic ``SIGNED``/``UNSIGNED`` tags do not parse text.

    Raises ``UnsupportedCoercionTagError`` for boolean and text tags.
    """

    resolved = resolve_tag(key, default, tag)
    if not isinstance(resolved, NUMERIC_TAG_TYPES):
        raise UnsupportedCoercionTagError(
            f"extract_from_numeric_or_string does not support tag {resolved}"
        )

    value = resolve_field(container, key, resolved)
    if value is FIELD_MISSING:
        return default

    if is_number(value):
        return read_value(key, value, default, resolved)

    if not isinstance(value, str):
        return default
    if isinstance(resolved, (SignedTag, UnsignedTag)):
        return default

    parsed = _parse_text(value, resolved)
    if parsed.overflow:
        report("overflow", key, resolved, f"text {value!r} is out of range")
        return default
    if parsed.consumed == 0:
        return default
    return parsed.value


__all__ = ["extract_from_numeric_or_string"]
