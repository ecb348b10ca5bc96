"""App-wide exception hierarchy.

Every error raised by the client core or the image proxy derives from
AppException so callers (pages, route handlers) can treat them uniformly.
"""


class AppException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class and define their own
    status_code and error_type for consistent error reporting.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


# Client-side errors raised around calls to the backend API
class TransportError(AppException):
    """Raised when no response was received (offline, DNS, timeout)."""

    status_code = 503
    error_type = "transport_error"

    def __init__(self, message: str = "Unable to reach the server"):
        super().__init__(message)


class ApplicationError(AppException):
    """Raised when the API answered with a non-2xx status.

    Carries the server-supplied human-readable message and, when the API
    provides one, a machine-readable error code.
    """

    error_type = "application_error"

    def __init__(
        self,
        message: str = "Request failed",
        status_code: int = 400,
        code: str | None = None,
    ):
        self.status_code = status_code
        self.code = code
        super().__init__(message)


# Validation errors (400)
class ValidationError(AppException):
    """Base class for validation errors."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


class FormValidationError(ValidationError):
    """Raised when form input fails local checks before any request is made."""

    error_type = "form_validation_error"

    def __init__(
        self,
        message: str = "Please correct the highlighted fields",
        field_errors: dict[str, str] | None = None,
    ):
        self.field_errors = field_errors or {}
        super().__init__(message)


class BadRequestError(ValidationError):
    """Raised for general bad request errors."""

    error_type = "bad_request"

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


# Service availability errors (503)
class ServiceNotConfiguredError(AppException):
    """Raised when an optional integration has no credentials configured."""

    status_code = 503
    error_type = "service_not_configured"

    def __init__(self, message: str = "Service is not configured"):
        super().__init__(message)


# External service errors (502)
class ExternalServiceError(AppException):
    """Base class for external service failures."""

    status_code = 502
    error_type = "external_service_error"

    def __init__(self, message: str = "External service error"):
        super().__init__(message)


class ProviderError(ExternalServiceError):
    """Raised when an upstream provider returns an unexpected response."""

    error_type = "provider_error"

    def __init__(self, message: str = "Upstream provider returned an invalid response"):
        super().__init__(message)
