"""
Standardized error codes for the adapter
"""
from enum import Enum


class ErrorCode(Enum):
    """Standardized error codes"""

    # Fatal errors (2000-2999)
    INVALID_PRODUCT_SCHEMA = "FATAL_2001"


class AdapterError(Exception):
    """Base exception with error code"""

    def __init__(self, error_code: ErrorCode, message: str, details: dict = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(f"{error_code.value}: {message}")

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }
