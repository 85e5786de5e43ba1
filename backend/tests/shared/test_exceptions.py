"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    DramaDeckError,
    ExternalServiceError,
)


class TestDramaDeckError:
    def test_message(self):
        """DramaDeckError should store message."""
        error = DramaDeckError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """DramaDeckError should default code to class name."""
        error = DramaDeckError("Test error")
        assert error.code == "DramaDeckError"

    def test_custom_code_and_details(self):
        """DramaDeckError should accept custom code and details."""
        error = DramaDeckError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        """DramaDeckError should convert to dict."""
        error = DramaDeckError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_to_dict_minimal(self):
        """DramaDeckError.to_dict should work with minimal args."""
        result = DramaDeckError("Test error").to_dict()
        assert result == {"error": "DramaDeckError", "message": "Test error", "details": {}}


class TestExternalServiceError:
    def test_stores_service(self):
        """ExternalServiceError should store the service name."""
        error = ExternalServiceError("Connection failed", service="catalog")
        assert isinstance(error, DramaDeckError)
        assert error.service == "catalog"
        assert error.to_dict()["details"]["service"] == "catalog"

    def test_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="catalog",
            details={"status_code": 500},
        )
        result = error.to_dict()

        assert result["details"]["service"] == "catalog"
        assert result["details"]["status_code"] == 500
