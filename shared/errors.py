"""
Shared error handling for the cache layer.
"""

from typing import Dict, Any, Optional


class AccessLayerException(Exception):
    """Base exception for cache layer errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(AccessLayerException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None,
                 code: str = "VALIDATION_ERROR"):
        super().__init__(code, message, details)


class CacheError(AccessLayerException):
    """Cache store errors surfaced to callers."""

    def __init__(self, message: str = "Cache error", details: Optional[Dict[str, Any]] = None,
                 code: str = "CACHE_ERROR"):
        super().__init__(code, message, details)


class HashWriteError(CacheError):
    """A hash mutation did not reach the store."""

    def __init__(self, message: str = "Hash write failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, code="CACHE_HASH_WRITE_ERROR")


class ScanLimitExceededError(CacheError):
    """Key enumeration did not complete within the configured number of round trips."""

    def __init__(self, message: str = "Scan iteration limit exceeded", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, code="CACHE_SCAN_LIMIT_EXCEEDED")


class CacheValidationError(ValidationError):
    """Caller broke a cache helper's input contract."""

    def __init__(self, message: str = "Cache validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, code="CACHE_VALIDATION_ERROR")
