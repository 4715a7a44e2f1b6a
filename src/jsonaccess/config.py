from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import contextmanager

import chz

DEBUG_CHECKS_ENV = "JSONACCESS_DEBUG_CHECKS"

_TRUTHY = {"1", "true", "yes", "on"}


@chz.chz
class AccessorConfig:
    debug_checks: bool = chz.field(
        default=False,
        doc="Emit diagnostics for suspicious reads; never changes results.",
    )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def config_from_env() -> AccessorConfig:
    return AccessorConfig(debug_checks=_env_flag(DEBUG_CHECKS_ENV))


_ACTIVE_CONFIG: AccessorConfig = config_from_env()


def get_config() -> AccessorConfig:
    return _ACTIVE_CONFIG


def set_config(config: AccessorConfig) -> None:
    global _ACTIVE_CONFIG
    if not isinstance(config, AccessorConfig):
        raise TypeError(f"set_config requires AccessorConfig, got {type(config)}")
    _ACTIVE_CONFIG = config


@contextmanager
def configured(**changes: object) -> Generator[AccessorConfig, None, None]:
    """Temporarily replace fields of the active config."""
    previous = get_config()
    updated = chz.replace(previous, **changes)
    set_config(updated)
    try:
        yield updated
    finally:
        set_config(previous)


__all__ = [
    "DEBUG_CHECKS_ENV",
    "AccessorConfig",
    "config_from_env",
    "configured",
    "get_config",
    "set_config",
]
