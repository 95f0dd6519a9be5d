"""
Unit tests for shared error types.
"""

from shared.errors import (
    AccessLayerException,
    CacheError,
    CacheValidationError,
    HashWriteError,
    ScanLimitExceededError,
    ValidationError,
)


class TestErrors:
    """Test cases for the error hierarchy."""

    def test_codes(self):
        """Test each error carries its code."""
        assert CacheError().code == "CACHE_ERROR"
        assert HashWriteError().code == "CACHE_HASH_WRITE_ERROR"
        assert ScanLimitExceededError().code == "CACHE_SCAN_LIMIT_EXCEEDED"
        assert CacheValidationError().code == "CACHE_VALIDATION_ERROR"
        assert ValidationError().code == "VALIDATION_ERROR"

    def test_hierarchy(self):
        """Test callers can catch cache failures by family."""
        assert issubclass(HashWriteError, CacheError)
        assert issubclass(ScanLimitExceededError, CacheError)
        assert issubclass(CacheValidationError, ValidationError)
        assert issubclass(CacheError, AccessLayerException)

    def test_details(self):
        """Test message and details are kept on the error."""
        error = HashWriteError("Failed to set field", {"hash": "h", "field": "f"})

        assert error.message == "Failed to set field"
        assert error.details == {"hash": "h", "field": "f"}
        assert CacheError().details == {}

    def test_message_is_str(self):
        """Test str() gives the message."""
        assert str(CacheError("store down")) == "store down"
