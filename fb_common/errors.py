"""Error types raised by the catalog loader and the preference layer."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

_Scalar = (str, int, float, bool, type(None))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    return value if isinstance(value, _Scalar) else str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a context mapping, stringifying anything JSON cannot hold."""
    return {str(key): _jsonable(val) for key, val in context.items()}


class FBError(Exception):
    """Base class for feature browser failures.

    ``context`` holds JSON-friendly details (ids, keys, positions) that end
    up in log records; ``cause`` becomes ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": self.message, "context": self.context}


class CatalogError(FBError):
    """The packaged catalog could not be read, parsed or validated."""


class PreferenceError(FBError):
    """A preference could not be read from or written to the store."""


E = TypeVar("E", bound=FBError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: BaseException | None = None,
) -> E:
    """Build an FBError subclass around a lower-level exception."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: FBError) -> dict[str, Any]:
    """Flatten an error for structured log fields."""
    payload: dict[str, Any] = {
        "error_type": error.error_type,
        "error": error.message,
        "error_context": error.context,
    }
    if error.__cause__ is not None:
        payload["error_cause"] = repr(error.__cause__)
    return payload
