"""Type tags selecting how an accessor reads a field.

The tag set is closed: ``TypeTag`` is a discriminated union on ``kind`` and
``tag_from_name`` rejects anything outside it.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, TypeAlias, cast

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import InvalidTagError


class _TypeTag(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return cast(str, getattr(self, "kind"))


class _IntegerTag(_TypeTag):
    min_value: ClassVar[int]
    max_value: ClassVar[int]

    def in_range(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


class Int32Tag(_IntegerTag):
    kind: Literal["int32"] = "int32"
    min_value: ClassVar[int] = -(2**31)
    max_value: ClassVar[int] = 2**31 - 1


class UInt32Tag(_IntegerTag):
    kind: Literal["uint32"] = "uint32"
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2**32 - 1


class Int64Tag(_IntegerTag):
    kind: Literal["int64"] = "int64"
    min_value: ClassVar[int] = -(2**63)
    max_value: ClassVar[int] = 2**63 - 1


class UInt64Tag(_IntegerTag):
    kind: Literal["uint64"] = "uint64"
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2**64 - 1


class SignedTag(_IntegerTag):
    """Generic signed integral; checked and read as int64."""

    kind: Literal["signed"] = "signed"
    min_value: ClassVar[int] = Int64Tag.min_value
    max_value: ClassVar[int] = Int64Tag.max_value


class UnsignedTag(_IntegerTag):
    """Generic unsigned integral; checked and read as uint64."""

    kind: Literal["unsigned"] = "unsigned"
    min_value: ClassVar[int] = UInt64Tag.min_value
    max_value: ClassVar[int] = UInt64Tag.max_value


class BoolTag(_TypeTag):
    kind: Literal["bool"] = "bool"


class Float32Tag(_TypeTag):
    kind: Literal["float32"] = "float32"


class Float64Tag(_TypeTag):
    kind: Literal["float64"] = "float64"


class StringTag(_TypeTag):
    kind: Literal["string"] = "string"


class CharTag(_TypeTag):
    """Character-style tag; resolves exactly like ``StringTag``."""

    kind: Literal["char"] = "char"


IntegerTag: TypeAlias = (
    Int32Tag | UInt32Tag | Int64Tag | UInt64Tag | SignedTag | UnsignedTag
)
FloatTag: TypeAlias = Float32Tag | Float64Tag
TextTag: TypeAlias = StringTag | CharTag
NumericTag: TypeAlias = IntegerTag | FloatTag

TypeTag: TypeAlias = Annotated[
    Int32Tag
    | UInt32Tag
    | Int64Tag
    | UInt64Tag
    | BoolTag
    | Float32Tag
    | Float64Tag
    | StringTag
    | CharTag
    | SignedTag
    | UnsignedTag,
    Field(discriminator="kind"),
]

INT32 = Int32Tag()
UINT32 = UInt32Tag()
INT64 = Int64Tag()
UINT64 = UInt64Tag()
BOOL = BoolTag()
FLOAT32 = Float32Tag()
FLOAT64 = Float64Tag()
STRING = StringTag()
CHAR = CharTag()
SIGNED = SignedTag()
UNSIGNED = UnsignedTag()

_TAG_ADAPTER: TypeAdapter[TypeTag] = TypeAdapter(TypeTag)


def tag_from_name(name: str) -> TypeTag:
    """Build a tag from its ``kind`` name, e.g. ``"uint64"``.

    Raises ``InvalidTagError`` for names outside the closed tag set.
    """

    try:
        return _TAG_ADAPTER.validate_python({"kind": name})
    except ValidationError as exc:
        raise InvalidTagError(f"unknown type tag {name!r}") from exc


def infer_tag(default: object) -> TypeTag:
    """Infer a tag from the Python type of ``default``.

    A plain ``int`` default selects ``INT32``. Pass an explicit tag for
    integers wider than 32 bits or unsigned values; otherwise valid int64
    fields silently resolve to the default.
    """

    if isinstance(default, bool):
        return BOOL
    if isinstance(default, int):
        return INT32
    if isinstance(default, float):
        return FLOAT64
    if isinstance(default, str):
        return STRING
    raise InvalidTagError(
        f"cannot infer a type tag from default of type {type(default).__name__}; "
        "pass tag= explicitly"
    )


__all__ = [
    "BOOL",
    "CHAR",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "SIGNED",
    "STRING",
    "UINT32",
    "UINT64",
    "UNSIGNED",
    "BoolTag",
    "CharTag",
    "Float32Tag",
    "Float64Tag",
    "FloatTag",
    "Int32Tag",
    "Int64Tag",
    "IntegerTag",
    "NumericTag",
    "SignedTag",
    "StringTag",
    "TextTag",
    "TypeTag",
    "UInt32Tag",
    "UInt64Tag",
    "UnsignedTag",
    "infer_tag",
    "tag_from_name",
]
