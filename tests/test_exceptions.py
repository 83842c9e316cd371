"""Tests for the exception hierarchy."""

from exercise_tracker.exceptions import (
    DuplicateKeyError,
    ErrorCode,
    ExerciseTrackerError,
    StoreError,
    UserNotFoundError,
    ValidationError,
)


class TestExceptions:

    def test_wire_body_is_flat(self):
        assert ValidationError("username is required").to_dict() == {"error": "username is required"}

    def test_status_codes(self):
        assert ValidationError("x").status_code == 400
        assert UserNotFoundError("abc").status_code == 404
        assert StoreError("x").status_code == 500
        assert DuplicateKeyError("x").status_code == 500

    def test_user_not_found_details(self):
        exc = UserNotFoundError("abc")

        assert exc.message == "user not found"
        assert exc.code == ErrorCode.USER_NOT_FOUND
        assert exc.details == {"resource_type": "User", "resource_id": "abc"}

    def test_store_error_keeps_message(self):
        exc = DuplicateKeyError("UNIQUE constraint failed: users.username", operation="insert")

        assert isinstance(exc, StoreError)
        assert isinstance(exc, ExerciseTrackerError)
        assert exc.message == "UNIQUE constraint failed: users.username"
        assert exc.details == {"operation": "insert"}
        assert exc.code == ErrorCode.DUPLICATE_KEY

    def test_repr(self):
        assert repr(StoreError("disk full")) == "StoreError(code=STORE_ERROR, message='disk full')"
