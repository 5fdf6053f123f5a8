"""Error hierarchy — tests for status codes and response payloads."""

from backoffice.core.errors import (
    ConflictError,
    DatabaseError,
    RequestValidationFailedError,
    ResourceNotFoundError,
)


def test_validation_error_payload_carries_field_and_details():
    err = RequestValidationFailedError(
        "Bad page", field="pageNumber", details={"pageNumber": 0},
    )
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "Bad page"
    assert body["field"] == "pageNumber"
    assert body["details"] == {"pageNumber": 0}


def test_not_found_default_message():
    err = ResourceNotFoundError("Customer", "abc")
    assert err.http_status == 404
    assert err.message == "Customer not found"
    assert err.to_response()["error"]["code"] == "RESOURCE_NOT_FOUND"


def test_conflict_and_database_status():
    assert ConflictError("Email already in use").http_status == 409
    db = DatabaseError("Connection lost", operation="commit")
    assert db.http_status == 503
    assert db.to_response()["error"]["code"] == "DATABASE_ERROR"
