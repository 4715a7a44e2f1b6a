import logging

import pytest

import jsonaccess
from jsonaccess import (
    INT32,
    INT64,
    UINT32,
    capture_diagnostics,
    configured,
    extract,
    extract_from_numeric_or_string,
    get_config,
    is_valid,
    set_config,
)
from jsonaccess.config import DEBUG_CHECKS_ENV, config_from_env
from jsonaccess.diagnostics import get_diagnostic_hook, set_diagnostic_hook

DOC = {"big": 2**40, "ratio": 0.5, "text": "99999999999", "name": "x"}


def test_numeric_subkind_mismatch_is_reported(debug_diagnostics) -> None:
    assert extract(DOC, "big", -1, INT32) == -1

    assert [d.code for d in debug_diagnostics] == ["numeric-subkind-mismatch"]
    assert debug_diagnostics[0].key == "big"
    assert debug_diagnostics[0].tag == "int32"


def test_float_read_as_integer_is_reported(debug_diagnostics) -> None:
    assert extract(DOC, "ratio", 0, INT64) == 0
    assert [d.code for d in debug_diagnostics] == ["numeric-subkind-mismatch"]


def test_non_numeric_mismatch_is_not_reported(debug_diagnostics) -> None:
    assert extract(DOC, "name", 0, INT32) == 0
    assert debug_diagnostics == []


def test_implicit_int32_is_reported(debug_diagnostics) -> None:
    assert extract(DOC, "missing", 3) == 3
    assert extract(DOC, "missing", False) is False

    assert [d.code for d in debug_diagnostics] == ["implicit-int32"]


def test_overflow_is_reported(debug_diagnostics) -> None:
    assert extract_from_numeric_or_string(DOC, "text", 0, UINT32) == 0
    assert [d.code for d in debug_diagnostics] == ["overflow"]


def test_non_object_container_is_reported(debug_diagnostics) -> None:
    assert is_valid(["a"], "0", INT32) is False
    assert [d.code for d in debug_diagnostics] == ["non-object-container"]


def test_diagnostics_are_silent_without_debug_checks() -> None:
    with configured(debug_checks=False), capture_diagnostics() as captured:
        assert extract(DOC, "big", -1, INT32) == -1
        assert extract_from_numeric_or_string(DOC, "text", 0, UINT32) == 0

    assert captured == []


def test_default_sink_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    previous = get_diagnostic_hook()
    set_diagnostic_hook(None)
    try:
        with configured(debug_checks=True), caplog.at_level(
            logging.WARNING, logger="jsonaccess"
        ):
            extract(DOC, "big", -1, INT32)
    finally:
        set_diagnostic_hook(previous)

    assert "numeric-subkind-mismatch" in caplog.text
    assert "'big'" in caplog.text


def test_configured_restores_previous_config() -> None:
    before = get_config()
    with configured(debug_checks=not before.debug_checks) as active:
        assert get_config() is active
        assert active.debug_checks is not before.debug_checks
    assert get_config() is before


def test_set_config_requires_accessor_config() -> None:
    with pytest.raises(TypeError, match="requires AccessorConfig"):
        set_config({"debug_checks": True})  # type: ignore[arg-type]


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DEBUG_CHECKS_ENV, "yes")
    assert config_from_env().debug_checks is True

    monkeypatch.setenv(DEBUG_CHECKS_ENV, "0")
    assert config_from_env().debug_checks is False

    monkeypatch.delenv(DEBUG_CHECKS_ENV)
    assert config_from_env().debug_checks is False


def test_package_exports_config_helpers() -> None:
    assert jsonaccess.get_config is get_config
