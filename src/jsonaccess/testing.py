from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import AccessorConfig, get_config, set_config
from .diagnostics import (
    Diagnostic,
    DiagnosticHook,
    capture_diagnostics,
    get_diagnostic_hook,
    set_diagnostic_hook,
)


@dataclass(frozen=True)
class _AccessorStateSnapshot:
    config: AccessorConfig
    hook: DiagnosticHook

    @classmethod
    def capture(cls) -> "_AccessorStateSnapshot":
        return cls(config=get_config(), hook=get_diagnostic_hook())

    def restore(self) -> None:
        set_config(self.config)
        set_diagnostic_hook(self.hook)


@contextmanager
def accessor_test_env(
    *, debug_checks: bool = True
) -> Generator[list[Diagnostic], None, None]:
    """Enable debug checks and capture diagnostics, restoring state on exit."""
    snapshot = _AccessorStateSnapshot.capture()
    set_config(AccessorConfig(debug_checks=debug_checks))
    try:
        with capture_diagnostics() as captured:
            yield captured
    finally:
        snapshot.restore()


@pytest.fixture()
def debug_diagnostics() -> Generator[list[Diagnostic], None, None]:
    """Run the test with debug checks on, yielding the captured diagnostics."""
    with accessor_test_env(debug_checks=True) as captured:
        yield captured
