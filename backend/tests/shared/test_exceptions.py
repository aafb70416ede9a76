"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    CartwiseError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestCartwiseError:
    def test_cartwise_error_message(self):
        """CartwiseError should store message."""
        error = CartwiseError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_cartwise_error_default_code(self):
        """CartwiseError should default code to class name."""
        error = CartwiseError("Test error")
        assert error.code == "CartwiseError"

    def test_cartwise_error_custom_code(self):
        """CartwiseError should accept custom code."""
        error = CartwiseError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_cartwise_error_default_details(self):
        """CartwiseError should default details to empty dict."""
        error = CartwiseError("Test error")
        assert error.details == {}

    def test_cartwise_error_custom_details(self):
        """CartwiseError should accept custom details."""
        error = CartwiseError("Test error", details={"key": "value"})
        assert error.details == {"key": "value"}

    def test_cartwise_error_to_dict(self):
        """CartwiseError should convert to dict."""
        error = CartwiseError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_cartwise_error_to_dict_minimal(self):
        """CartwiseError.to_dict should work with minimal args."""
        error = CartwiseError("Test error")
        result = error.to_dict()

        assert result["error"] == "CartwiseError"
        assert result["message"] == "Test error"
        assert result["details"] == {}


class TestNotFoundError:
    def test_not_found_error_inherits_cartwise_error(self):
        """NotFoundError should inherit from CartwiseError."""
        error = NotFoundError("Resource not found")
        assert isinstance(error, CartwiseError)

    def test_not_found_error_default_code(self):
        """NotFoundError should default code to class name."""
        error = NotFoundError("Resource not found")
        assert error.code == "NotFoundError"


class TestValidationError:
    def test_validation_error_inherits_cartwise_error(self):
        """ValidationError should inherit from CartwiseError."""
        error = ValidationError("Invalid input")
        assert isinstance(error, CartwiseError)

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError(
            "Validation failed",
            details={"fields": {"email": "Invalid format"}}
        )
        assert error.details["fields"]["email"] == "Invalid format"


class TestAuthenticationError:
    def test_authentication_error_inherits_cartwise_error(self):
        """AuthenticationError should inherit from CartwiseError."""
        error = AuthenticationError("Invalid token")
        assert isinstance(error, CartwiseError)


class TestAuthorizationError:
    def test_authorization_error_inherits_cartwise_error(self):
        """AuthorizationError should inherit from CartwiseError."""
        error = AuthorizationError("Insufficient permissions")
        assert isinstance(error, CartwiseError)


class TestExternalServiceError:
    def test_external_service_error_inherits_cartwise_error(self):
        """ExternalServiceError should inherit from CartwiseError."""
        error = ExternalServiceError("Connection failed", service="llm")
        assert isinstance(error, CartwiseError)

    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="llm")
        assert error.service == "llm"

    def test_external_service_error_includes_service_in_details(self):
        """ExternalServiceError should include service in details."""
        error = ExternalServiceError("Connection failed", service="llm")
        result = error.to_dict()

        assert result["details"]["service"] == "llm"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="llm",
            details={"status_code": 500}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "llm"
        assert result["details"]["status_code"] == 500


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error_cls,status",
        [
            (CartwiseError, 500),
            (NotFoundError, 404),
            (ValidationError, 422),
            (AuthenticationError, 401),
            (AuthorizationError, 403),
        ],
    )
    def test_status_code_per_kind(self, error_cls, status):
        """Each error kind should carry the HTTP status it maps to."""
        assert error_cls("boom").status_code == status

    def test_external_service_error_is_bad_gateway(self):
        """Upstream failures should map to 502."""
        assert ExternalServiceError("down", service="llm").status_code == 502
