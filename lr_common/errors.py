"""Shared error taxonomy for luraph-cli."""

from __future__ import annotations

from typing import Any, Mapping, Sequence, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class LRError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(LRError):
    """Failure due to an invalid option set or invalid local configuration."""


class RemoteApiError(LRError):
    """Failure reported by (or while talking to) the remote Luraph API."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        messages: Sequence[str] = (),
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        merged = dict(context or {})
        if status is not None:
            merged.setdefault("status", status)
        super().__init__(message, context=merged, cause=cause)
        self.status = status
        self.messages = list(messages)


T = TypeVar("T", bound=LRError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed LRError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: LRError) -> dict[str, Any]:
    """Convert an LRError to a log/event payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
