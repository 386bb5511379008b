"""Unit tests for domain error to HTTP translation."""

from salonhub.domain.error import (
    MaxNestingDepthError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from salonhub.interface.api.errors import to_http_exception


def test_not_found_is_404():
    exc = to_http_exception(NotFoundError("Topic", "7"))

    assert exc.status_code == 404
    assert exc.detail == "Topic not found: 7"


def test_rate_limit_is_429_with_reason():
    exc = to_http_exception(RateLimitError("Content contains spam keywords"))

    assert exc.status_code == 429
    assert exc.detail == "Content contains spam keywords"


def test_validation_and_nesting_are_400():
    assert to_http_exception(ValidationError("bad")).status_code == 400
    assert to_http_exception(MaxNestingDepthError(2)).status_code == 400
