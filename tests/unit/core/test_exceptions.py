"""Unit tests for application exceptions."""

from ntc_booking.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    ServiceResponseError,
    StorageError,
    TransportError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Every error is caught at the command boundary as ApplicationError."""

    def test_all_derive_from_application_error(self):
        for error in (
            AuthenticationError(),
            AuthorizationError(),
            ValidationError(),
            StorageError(),
            TransportError(),
            ServiceResponseError({"message": "x"}, 400),
        ):
            assert isinstance(error, ApplicationError)

    def test_service_errors_are_external(self):
        assert isinstance(TransportError(), ExternalServiceError)
        assert isinstance(ServiceResponseError(None, 500), ExternalServiceError)


class TestServiceResponseError:
    def test_keeps_payload_and_status(self):
        error = ServiceResponseError({"message": "Route exists"}, 409)
        assert error.payload == {"message": "Route exists"}
        assert error.status_code == 409
        assert "409" in error.message
        assert error.code == "SYS_SERVICE_RESPONSE_ERROR"


class TestCodes:
    def test_codes(self):
        assert AuthenticationError().code == "AUTH_UNAUTHORIZED"
        assert AuthorizationError().code == "AUTHZ_FORBIDDEN"
        assert ValidationError().code == "VAL_VALIDATION_ERROR"
        assert TransportError("boom").message == "boom"

    def test_validation_details_default_to_empty(self):
        assert ValidationError("bad").details == {}
