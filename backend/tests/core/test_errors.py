"""Error hierarchy — status codes, envelopes, and the store/operation split.

Tests:
    - Each error maps to its HTTP status and public message
    - to_response() omits `error` unless a driver detail exists
    - ScheduleOperationError keeps the route message but the store's detail
"""

from schedule_api.core.errors import (
    ErrorCategory, InvalidScheduleIdError, MissingFieldsError,
    NoSchedulesFoundError, ScheduleApiError, ScheduleNotFoundError,
    ScheduleOperationError, StoreError,
)


def test_missing_fields_is_400_with_fixed_message():
    """Missing fields map to 400 with the fixed message."""
    err = MissingFieldsError(["title"])
    assert err.http_status == 400
    assert err.fields == ["title"]
    assert err.to_response() == {"success": False, "message": "All fields are required!"}


def test_not_found_and_empty_result_are_distinct_404s():
    """Unknown id and empty listing are both 404 but distinct categories."""
    not_found = ScheduleNotFoundError("abc")
    empty = NoSchedulesFoundError()
    assert not_found.http_status == empty.http_status == 404
    assert not_found.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert empty.category is ErrorCategory.EMPTY_RESULT
    assert empty.to_response()["message"] == "No schedules found"


def test_store_error_carries_detail():
    """Store errors expose the driver message as `error`."""
    err = StoreError("connection reset", "insert")
    assert err.http_status == 500
    assert err.to_response()["error"] == "connection reset"


def test_invalid_id_is_a_store_error_with_own_code():
    """Malformed ids are store errors with their own code."""
    err = InvalidScheduleIdError("xyz", "bad id")
    assert isinstance(err, StoreError)
    assert isinstance(err, ScheduleApiError)
    assert err.code == "INVALID_SCHEDULE_ID"
    assert err.operation == "parse_id"


def test_operation_error_relabels_store_error():
    """Operation errors keep the route message and the store detail."""
    cause = StoreError("timed out", "update")
    err = ScheduleOperationError("Failed to update schedule", cause)
    assert err.cause is cause
    assert err.to_response() == {
        "success": False,
        "message": "Failed to update schedule",
        "error": "timed out",
    }
