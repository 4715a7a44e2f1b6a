from __future__ import annotations


class JsonAccessError(Exception):
    """Base class for jsonaccess programming and loading errors.

    Field-level failures (absent key, kind mismatch, malformed text, overflow)
    never raise; they resolve to the caller's default.
    """


class InvalidTagError(JsonAccessError, ValueError):
    """Raised when a type tag is built from an unknown name or inferred from an
    unsupported default value."""


class UnsupportedCoercionTagError(JsonAccessError, TypeError):
    """Raised when text coercion is requested for a non-numeric tag."""


class DocumentLoadError(JsonAccessError):
    """Raised when a document cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to load document {path!r}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "DocumentLoadError",
    "InvalidTagError",
    "JsonAccessError",
    "UnsupportedCoercionTagError",
]
