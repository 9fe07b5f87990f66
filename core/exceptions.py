"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'WorkoutVideo').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails.

    Carries every violated field constraint, not just the first one. Each
    violation is a dict with ``field``, ``constraint`` and ``message`` keys.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        violations: Optional[List[Dict[str, Any]]] = None
    ):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
            violations: Optional list of violated field constraints.
        """
        self.violations = list(violations or [])
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if self.violations:
            details["violations"] = self.violations
        super().__init__(message, status_code=400, details=details)


class HipMeasurementRequiredError(ValidationError):
    """Raised when a female body-fat calculation has no usable hip measurement."""

    def __init__(self):
        super().__init__(
            "Hip measurement is required for females",
            field="hip",
            violations=[{
                "field": "hip",
                "constraint": "required_for_female",
                "message": "Hip measurement is required for females",
            }],
        )


class DomainError(AppException):
    """Exception raised when individually valid inputs are undefined for a formula.

    The caller must not persist or display a number when this is raised.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize domain error.

        Args:
            message: Error message.
            details: Optional dictionary with the offending quantities.
        """
        super().__init__(message, status_code=422, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'health').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
