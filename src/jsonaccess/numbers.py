"""Locale-free base-10 parsing into fixed-width numeric types.

Parsing follows the C ``strto*`` family: leading whitespace is skipped, an
optional sign is accepted and parsing stops at the first character that
cannot extend the literal. Instead of ``errno`` every call returns a
``ParsedNumber`` carrying the value, how many characters were consumed and
whether the literal was out of range.
"""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass

from .tags import Float32Tag, FloatTag, IntegerTag

_WHITESPACE = r"[ \t\n\v\f\r]*"

_INT_RE = re.compile(_WHITESPACE + r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")

_FLOAT_RE = re.compile(
    _WHITESPACE
    + r"(?P<literal>[+-]?(?:"
    + r"(?P<special>inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)"
    + r"|(?P<mantissa>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    + r"))",
    re.IGNORECASE,
)

# Anything longer than this (after stripping leading zeros) cannot fit in 64 bits.
_MAX_INT_DIGITS = 20

_FLOAT32_MIN_NORMAL = 2.0**-126


@dataclass(frozen=True)
class ParsedNumber:
    value: int | float
    consumed: int
    overflow: bool = False

    @property
    def ok(self) -> bool:
        return self.consumed > 0 and not self.overflow


_MALFORMED = ParsedNumber(value=0, consumed=0)


def parse_int(text: str, tag: IntegerTag) -> ParsedNumber:
    """Parse a base-10 integer prefix of ``text`` into the width of ``tag``.

    On overflow the value is clamped to the nearest bound of ``tag``.
    Negative literals are out of range for unsigned tags.
    """

    match = _INT_RE.match(text)
    if match is None:
        return _MALFORMED

    consumed = match.end()
    negative = match.group("sign") == "-"
    digits = match.group("digits").lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        bound = tag.min_value if negative else tag.max_value
        return ParsedNumber(value=bound, consumed=consumed, overflow=True)

    value = -int(digits) if negative else int(digits)
    if value < tag.min_value:
        return ParsedNumber(value=tag.min_value, consumed=consumed, overflow=True)
    if value > tag.max_value:
        return ParsedNumber(value=tag.max_value, consumed=consumed, overflow=True)
    return ParsedNumber(value=value, consumed=consumed)


def parse_float(text: str, tag: FloatTag) -> ParsedNumber:
    """Parse a floating-point prefix of ``text`` into the width of ``tag``.

    Accepts decimal literals with optional exponent, ``inf``, ``infinity`` and
    ``nan``. A finite literal that rounds to infinity, or a non-zero literal
    that rounds below the smallest normal value of the width, is a range error.
    """

    match = _FLOAT_RE.match(text)
    if match is None:
        return _MALFORMED

    consumed = match.end()
    literal = match.group("literal")
    special = match.group("special")
    if special is not None:
        if special.lower().startswith("nan"):
            literal = literal[: len(literal) - len(special)] + "nan"
        return ParsedNumber(value=_narrow(float(literal), tag), consumed=consumed)

    value = float(literal)
    nonzero = any(char in "123456789" for char in match.group("mantissa"))
    if isinstance(tag, Float32Tag):
        value = narrow_to_float32(value)
        min_normal = _FLOAT32_MIN_NORMAL
    else:
        min_normal = sys.float_info.min

    if math.isinf(value):
        return ParsedNumber(value=value, consumed=consumed, overflow=True)
    # Underflow to zero or to a subnormal is a range error, as strtod reports it.
    if nonzero and abs(value) < min_normal:
        return ParsedNumber(value=value, consumed=consumed, overflow=True)
    return ParsedNumber(value=value, consumed=consumed)


def _narrow(value: float, tag: FloatTag) -> float:
    if isinstance(tag, Float32Tag):
        return narrow_to_float32(value)
    return value


def narrow_to_float32(value: float) -> float:
    """Round ``value`` to single precision; out-of-range values become infinity."""

    if math.isnan(value) or math.isinf(value):
        return value
    try:
        narrowed = struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        # Finite values that round past the single-precision maximum.
        return math.copysign(math.inf, value)
    return narrowed


__all__ = ["ParsedNumber", "narrow_to_float32", "parse_float", "parse_int"]
