"""Unit tests for mapping errors to HTTP responses."""

import pytest

from board.domain.error import (
    DomainError,
    InvalidModerationSecretError,
    InvalidReactionError,
    ModerationDisabledError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.interface.error import InvalidQueryError, internal_error, to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    def test_validation_errors_are_listed(self):
        exc = to_http_exception(ValidationError(["one", "two"]))

        assert exc.status_code == 400
        assert exc.detail == {"errors": ["one", "two"]}

    def test_invalid_query(self):
        exc = to_http_exception(InvalidQueryError("limit must be between 1 and 100"))

        assert exc.status_code == 400
        assert exc.detail == {"errors": ["limit must be between 1 and 100"]}

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (InvalidReactionError("angry"), 400),
            (NotFoundError("Post", "x"), 404),
            (NotAuthorizedError("post", "x", "delete"), 403),
            (ModerationDisabledError(), 409),
            (InvalidModerationSecretError(), 401),
            (DomainError("something"), 400),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error).status_code == status_code

    def test_not_found_hides_identifier(self):
        exc = to_http_exception(NotFoundError("Comment", "secret-id"))

        assert exc.detail == "Comment not found"

    def test_internal_error(self):
        exc = internal_error("create post")

        assert exc.status_code == 500
        assert exc.detail == "Failed to create post"
