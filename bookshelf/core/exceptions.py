"""Custom exception classes."""

from typing import Any


class BookshelfError(Exception):
    """Base error with a structured payload."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Any = None,
    ):
        self.code = code
        self.error_message = message
        self.details = details

        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.error_message,
                "details": self.details,
            }
        }


class DataSourceError(BookshelfError):
    """Catalog or reading-history backend failed."""

    def __init__(self, operation: str, message: str = "Data source unavailable"):
        self.operation = operation

        super().__init__(
            code="DATA_SOURCE_UNAVAILABLE",
            message=f"{message} during {operation}",
            details={"operation": operation},
        )


class ValidationError(BookshelfError):
    """Malformed configuration or caller input."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            details=details,
        )
