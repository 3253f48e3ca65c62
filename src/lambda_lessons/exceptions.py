# src/lambda_lessons/exceptions.py

"""
Shared custom exceptions for the lesson handlers.

Store failures (botocore ``ClientError`` and friends) are deliberately absent
here: the repository lets them propagate unmodified. These classes cover the
errors the handlers raise themselves.

Exception Hierarchy:
- LambdaLessonsError (base)
  - NonRetryableError (should not be retried)
    - ValidationError
      - InvalidRequestError
    - ConfigurationError
"""

from typing import Any, Dict, Optional


class LambdaLessonsError(Exception):
    """Base exception for all lesson handler errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class NonRetryableError(LambdaLessonsError):
    """Base class for errors that should not be retried."""
    pass


# === Validation Errors ===

class ValidationError(NonRetryableError):
    """Base class for validation errors."""
    pass


class InvalidRequestError(ValidationError):
    """Raised when an incoming event cannot be mapped to a request model."""

    def __init__(self, message: str, **kwargs):
        if "error_code" not in kwargs:
            kwargs["error_code"] = "INVALID_REQUEST"
        super().__init__(message, **kwargs)


# === Configuration Errors ===

class ConfigurationError(NonRetryableError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===

def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, LambdaLessonsError):
        return error.to_dict()
    return {
        "error_type": error.__class__.__name__,
        "message": str(error),
    }
