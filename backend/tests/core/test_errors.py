"""Error Hierarchy — status codes and the REST error envelope."""

from exercise_tracker.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, ExerciseDateError,
    ResourceNotFoundError, ValidationFailedError,
)


def test_not_found_is_404_with_envelope():
    err = ResourceNotFoundError("User", "abc", ErrorContext(user_id="abc"))
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["message"] == "User 'abc' not found"
    assert body["context"]["user_id"] == "abc"


def test_validation_error_lists_field():
    err = ValidationFailedError("Invalid limit: 'x'", "limit")
    details = err.to_response()["error"]["details"]
    assert err.http_status == 400
    assert details == [
        {"field": "limit", "message": "Invalid limit: 'x'", "type": "value_error"},
    ]


def test_date_error_is_a_validation_error():
    err = ExerciseDateError("31/02/2024")
    assert isinstance(err, ValidationFailedError)
    assert err.field == "date"
    assert err.code == "VALIDATION_ERROR"


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity.value == "critical"
    assert err.message.startswith("Database execute failed")
