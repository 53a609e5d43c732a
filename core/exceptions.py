"""
Custom exception hierarchy for the companion service.
Provides structured error handling with proper context.
"""

from typing import Optional, Dict, Any


class CompanionException(Exception):
    """Base exception for all companion errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize exception with message and optional context.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# ==================== Validation Exceptions ====================


class ValidationException(CompanionException):
    """Base exception for validation errors."""

    pass


class InvalidPayloadError(ValidationException):
    """Raised when a request body is missing fields or fails validation."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            message=f"Invalid payload: {field} - {reason}",
            error_code="INVALID_PAYLOAD",
            context={"field": field, "reason": reason},
        )


class ConfigurationError(ValidationException):
    """Raised when configuration or static reference data is invalid."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            message=f"Invalid configuration: {setting} - {reason}",
            error_code="CONFIGURATION_ERROR",
            context={"setting": setting, "reason": reason},
        )
