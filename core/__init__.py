"""
Core utilities and infrastructure for the companion service.
"""

from core.exceptions import (
    CompanionException,
    ValidationException,
    InvalidPayloadError,
    ConfigurationError,
)
from core.logging_config import configure_logging, get_logger

__all__ = [
    "CompanionException",
    "ValidationException",
    "InvalidPayloadError",
    "ConfigurationError",
    "configure_logging",
    "get_logger",
]
