"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used to describe load failures (fetch, schema,
empty data) and invalid user input. Each error carries a stable code, a
human-readable message, structured context for logging and a transient flag.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base for lookup errors.

    ``code`` is one of the stable identifiers such as ``DATA_FETCH_ERROR``;
    ``context`` holds log-only details (source, headers, HTTP status) and is
    never shown to the user.

    >>> str(AppError("EMPTY_DATASET_ERROR", "no rows"))
    'EMPTY_DATASET_ERROR: no rows'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class DataValidationError(AppError):
    """Raised for data that fails schema or content validation."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "DATA_VALIDATION_ERROR",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code, message, context=context, transient=False)


class SchemaMismatchError(DataValidationError):
    """Raised when the district name column cannot be located among headers."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, code="SCHEMA_MISMATCH_ERROR", context=context)


class EmptyDatasetError(DataValidationError):
    """Raised when the CSV payload is empty, unparseable or has no rows."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, code="EMPTY_DATASET_ERROR", context=context)


class UserInputError(AppError):
    """Raised when user input does not resolve to a usable value."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("USER_INPUT_ERROR", message, context=context, transient=False)


class ExternalServiceError(AppError):
    """Raised for unexpected failures from an external service."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "EXTERNAL_SERVICE_ERROR",
        context: Mapping[str, Any] | None = None,
        transient: bool = True,
    ) -> None:
        super().__init__(code, message, context=context, transient=transient)


class DataFetchError(ExternalServiceError):
    """Raised when the CSV resource cannot be read or downloaded."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, code="DATA_FETCH_ERROR", context=context)
