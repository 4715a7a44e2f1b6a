"""Debug-only diagnostics for suspicious accessor calls.

Diagnostics are reported only while ``debug_checks`` is enabled and never
alter the value an accessor returns.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Literal

from .config import get_config
from .runtime.logging import get_logger

DiagnosticCode = Literal[
    "numeric-subkind-mismatch",
    "overflow",
    "implicit-int32",
    "non-object-container",
]


@dataclass(frozen=True)
class Diagnostic:
    code: DiagnosticCode
    key: str
    tag: str
    detail: str


DiagnosticHook = Callable[[Diagnostic], None]


def _log_diagnostic(diagnostic: Diagnostic) -> None:
    get_logger().warning(
        "%s: field %r read as %s: %s",
        diagnostic.code,
        diagnostic.key,
        diagnostic.tag,
        diagnostic.detail,
    )


_HOOK: DiagnosticHook = _log_diagnostic


def set_diagnostic_hook(hook: DiagnosticHook | None) -> None:
    """Install ``hook``; ``None`` restores the logging sink."""
    global _HOOK
    _HOOK = _log_diagnostic if hook is None else hook


def get_diagnostic_hook() -> DiagnosticHook:
    return _HOOK


def debug_checks_enabled() -> bool:
    return get_config().debug_checks


def report(code: DiagnosticCode, key: str, tag: object, detail: str) -> None:
    if not debug_checks_enabled():
        return
    _HOOK(Diagnostic(code=code, key=key, tag=str(tag), detail=detail))


@contextmanager
def capture_diagnostics() -> Generator[list[Diagnostic], None, None]:
    """Collect diagnostics into a list instead of logging them."""
    captured: list[Diagnostic] = []
    previous = get_diagnostic_hook()
    set_diagnostic_hook(captured.append)
    try:
        yield captured
    finally:
        set_diagnostic_hook(previous)


__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticHook",
    "capture_diagnostics",
    "debug_checks_enabled",
    "get_diagnostic_hook",
    "report",
    "set_diagnostic_hook",
]
