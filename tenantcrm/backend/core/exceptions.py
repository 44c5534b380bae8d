"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
The `code` of each exception is sent to clients as the `error` field of
the response body, so codes are short snake_case identifiers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "internal_error") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found", code: str = "not_found") -> None:
        super().__init__(message, code=code)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: dict | None = None,
    ) -> None:
        self.details = details or {}
        super().__init__(message, code=code)


class AuthenticationError(ApplicationError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication required", code: str = "unauthorized") -> None:
        super().__init__(message, code=code)


class AuthorizationError(ApplicationError):
    """Raised when authorization fails."""

    def __init__(self, message: str = "Permission denied", code: str = "forbidden") -> None:
        super().__init__(message, code=code)


class ConflictError(ApplicationError):
    """Raised when there is a state conflict."""

    def __init__(self, message: str = "Resource conflict", code: str = "conflict") -> None:
        super().__init__(message, code=code)


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error", code: str = "external_service_error") -> None:
        super().__init__(message, code=code)


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error", code: str = "database_error") -> None:
        super().__init__(message, code=code)
