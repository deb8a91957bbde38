"""
Custom exception hierarchy for structured error handling.

WHY: Every rejection the API can produce is an expected, recoverable outcome.
Modelling each one as an exception class gives:
1. One HTTP status code per failure kind, mapped in a single handler
2. Structured error responses with contextual data
3. A single place that lists everything a client can be told "no" about

IMPORTANT: NEVER raise the base Exception class from application code.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    WHY: Centralizing exception handling in a base class ensures consistent
    error responses and HTTP status code mapping.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (overrides class default)
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        sensitive_fields = {"password", "token", "secret", "key", "api_key"}
        filtered_context = {
            k: _jsonable(v) for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": filtered_context if filtered_context else None,
        }


def _jsonable(value: Any) -> Any:
    # UUIDs and datetimes end up in context; JSONResponse cannot encode them
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


# ============================================================================
# Validation & Input Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when input validation fails.

    WHY: Validation errors return 400 Bad Request with details about
    which fields failed validation, helping users correct their input.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"


class InvalidAgeError(ValidationError):
    """
    Raised when a user is given a negative age.

    HTTP Status: 400 Bad Request
    """

    default_message = "Age must be positive"


class EmailConflictError(ValidationError):
    """
    Raised when a create or update would give two users the same email.

    WHAT: Covers both the advisory pre-check in the validation layer and the
    unique index violation reported by the database.

    HTTP Status: 400 Bad Request
    """

    default_message = "Email already exists"

    def __init__(self, email: str, **context: Any):
        super().__init__(message=f"Email already exists: {email}", email=email, **context)


class DanglingReferenceError(ValidationError):
    """
    Raised when a new entity references another entity that does not exist.

    WHY: A missing foreign key in a request body is a client error on the
    request being made (400), not a missing resource at the request URL (404).

    HTTP Status: 400 Bad Request
    """

    resource_type: str = "Resource"
    default_message = "Referenced resource not found"

    def __init__(self, resource_id: Any, **context: Any):
        super().__init__(
            message=f"{self.resource_type} not found with id: {resource_id}",
            resource_type=self.resource_type,
            resource_id=resource_id,
            **context,
        )


class UserNotFoundError(DanglingReferenceError):
    """Raised when a post or comment references a user that doesn't exist."""

    resource_type = "User"


class PostNotFoundError(DanglingReferenceError):
    """Raised when a comment references a post that doesn't exist."""

    resource_type = "Post"


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(AppException):
    """
    Raised when a requested resource doesn't exist.

    WHY: 404 Not Found is the standard HTTP status for missing resources.
    Including resource type and ID in context helps debugging.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Resource not found"

    @classmethod
    def for_id(cls, resource_type: str, resource_id: Any) -> "ResourceNotFoundError":
        """
        Build the standard "<Type> not found with id: <id>" error.

        Args:
            resource_type: Entity name used in the message
            resource_id: Identifier that was looked up

        Returns:
            ResourceNotFoundError ready to raise
        """
        return cls(
            message=f"{resource_type} not found with id: {resource_id}",
            resource_type=resource_type,
            resource_id=resource_id,
        )


class ResourceAlreadyExistsError(AppException):
    """
    Raised when a write collides with a unique constraint in storage.

    WHY: The DAO layer only knows that a constraint was violated, not which
    business rule that corresponds to. Services translate it (e.g. into
    EmailConflictError for the users table).

    HTTP Status: 409 Conflict
    """

    status_code = 409
    default_message = "Resource already exists"

