"""Error Hierarchy — verifies codes, statuses, and flat envelopes."""

from backstage_app.core.errors import (
    BackstageAppError, EndpointNotFoundError, ErrorCategory,
    InvalidRequestBodyError, RequiredFieldsError,
)


def test_required_fields_error_message_and_status():
    err = RequiredFieldsError(["name", "version"])
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.message == "Name and version are required"


def test_endpoint_not_found_envelope():
    err = EndpointNotFoundError("/nope", "PATCH")
    assert err.http_status == 404
    assert err.to_response() == {
        "error": "Endpoint not found", "path": "/nope", "method": "PATCH",
    }


def test_invalid_body_envelope_carries_details():
    details = [{"field": "version", "message": "Input should be a valid string", "type": "string_type"}]
    err = InvalidRequestBodyError(details)
    assert err.to_response() == {"error": "Invalid request body", "details": details}


def test_all_errors_share_base():
    for err in (
        RequiredFieldsError(["name"]),
        EndpointNotFoundError("/", "GET"),
        InvalidRequestBodyError([]),
    ):
        assert isinstance(err, BackstageAppError)
        assert set(err.to_response()) >= {"error"}
