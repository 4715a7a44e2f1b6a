import pytest

from jsonaccess import (
    BOOL,
    CHAR,
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    SIGNED,
    STRING,
    UINT32,
    UINT64,
    UNSIGNED,
    is_valid,
    is_valid_array,
    is_valid_object,
)

DOC = {
    "small": 5,
    "negative": -5,
    "int32_max": 2**31 - 1,
    "int32_overflow": 2**31,
    "uint32_max": 2**32 - 1,
    "uint32_overflow": 2**32,
    "int64_max": 2**63 - 1,
    "uint64_max": 2**64 - 1,
    "too_big": 2**64,
    "flag": True,
    "ratio": 0.5,
    "name": "mnist",
    "items": [1, 2, 3],
    "config": {"seed": 42},
    "nothing": None,
}


@pytest.mark.parametrize(
    ("key", "tag", "expected"),
    [
        ("small", INT32, True),
        ("negative", INT32, True),
        ("int32_max", INT32, True),
        ("int32_overflow", INT32, False),
        ("negative", UINT32, False),
        ("uint32_max", UINT32, True),
        ("uint32_overflow", UINT32, False),
        ("int32_overflow", INT64, True),
        ("int64_max", INT64, True),
        ("uint64_max", INT64, False),
        ("uint64_max", UINT64, True),
        ("too_big", UINT64, False),
        ("negative", SIGNED, True),
        ("uint64_max", SIGNED, False),
        ("uint64_max", UNSIGNED, True),
        ("negative", UNSIGNED, False),
        ("flag", BOOL, True),
        ("small", BOOL, False),
        ("ratio", FLOAT32, True),
        ("ratio", FLOAT64, True),
        ("small", FLOAT64, False),
        ("name", STRING, True),
        ("name", CHAR, True),
        ("small", STRING, False),
        ("nothing", STRING, False),
    ],
)
def test_is_valid_kind_matrix(key: str, tag, expected: bool) -> None:
    assert is_valid(DOC, key, tag) is expected


def test_is_valid_rejects_bool_as_integer() -> None:
    """Booleans are never integers even though bool subclasses int."""

    assert is_valid(DOC, "flag", INT32) is False
    assert is_valid(DOC, "flag", UINT64) is False


def test_is_valid_is_false_for_absent_key() -> None:
    for tag in (INT32, UINT32, INT64, UINT64, BOOL, FLOAT32, FLOAT64, STRING):
        assert is_valid(DOC, "missing", tag) is False


def test_is_valid_is_false_for_non_object_container() -> None:
    assert is_valid([1, 2], "0", INT32) is False
    assert is_valid("text", "t", STRING) is False


def test_is_valid_array_and_object() -> None:
    assert is_valid_array(DOC, "items") is True
    assert is_valid_array(DOC, "config") is False
    assert is_valid_array(DOC, "small") is False
    assert is_valid_array(DOC, "missing") is False

    assert is_valid_object(DOC, "config") is True
    assert is_valid_object(DOC, "items") is False
    assert is_valid_object(DOC, "name") is False
    assert is_valid_object(DOC, "missing") is False


def test_is_valid_works_on_nested_objects() -> None:
    assert is_valid(DOC["config"], "seed", INT32) is True
