"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the task tracker."""

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FILTER = "INVALID_FILTER"

    # Lifecycle misuse
    STATE_ERROR = "STATE_ERROR"

    # Storage errors (recovered, never propagated to the user)
    STORAGE_ERROR = "STORAGE_ERROR"
    STORAGE_CORRUPT = "STORAGE_CORRUPT"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(self.message)


class TaskValidationError(AppException):
    """Task name or description failed validation."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="; ".join(error["message"] for error in errors) or "Invalid task",
            details=errors,
        )

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [error["field"] for error in self.details or []]


class InvalidFilterError(AppException):
    """Unknown filter mode requested from the view projector."""

    def __init__(self, mode: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_FILTER,
            message=f"Unknown filter mode: {mode}",
            details={"mode": mode},
        )


class NotHydratedError(AppException):
    """A command was issued before the collection was loaded."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.STATE_ERROR,
            message="Task collection has not been hydrated yet",
        )


class AlreadyHydratedError(AppException):
    """Hydration was attempted a second time."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.STATE_ERROR,
            message="Task collection is already hydrated",
        )


class StorageError(AppException):
    """The key/value store could not be read or written."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=f"Storage {operation} failed: {cause}",
            details={"operation": operation, "error_type": type(cause).__name__},
        )
        self.__cause__ = cause


class StorageCorruptError(AppException):
    """The stored value could not be parsed into task records."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_CORRUPT,
            message=f"Stored value under {key} is not a valid task list",
            details={"key": key, "reason": reason},
        )
