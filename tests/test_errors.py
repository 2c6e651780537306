import pytest

from loops.errors import (
    LoopsAPIError,
    LoopsError,
    LoopsValidationError,
    RateLimitExceededError,
    extract_error,
    extract_message,
)


@pytest.mark.parametrize(
    "body, expected",
    [
        ('{"message": "X"}', "HTTP 400: X"),
        ('{"error": "Y"}', "HTTP 400: Y"),
        ('{"message": "X", "error": "Y"}', "HTTP 400: X"),
        ('{"message": null, "error": "Y"}', "HTTP 400: Y"),
        ('{"success": false}', "HTTP 400"),
        ('["not", "an", "object"]', "HTTP 400"),
        ("{broken", "HTTP 400"),
        ("[" * 100000 + "]" * 100000, "HTTP 400"),
        ("", "HTTP 400"),
        (None, "HTTP 400"),
    ],
)
def test_extract_message(body, expected: str) -> None:
    assert extract_message(400, body) == expected
    assert extract_message(400, body) == expected


def test_extract_error() -> None:
    assert extract_error('{"error": "Invalid email format"}') == "Invalid email format"
    assert extract_error('{"message": "only a message"}') is None
    assert extract_error("<html></html>") is None
    assert extract_error('{"error": {"code": 7}}') == '{"code": 7}'


def test_from_response_populates_fields() -> None:
    body = '{"success": false, "error": "Invalid email format"}'

    err = LoopsAPIError.from_response(400, body)

    assert err.status_code == 400
    assert err.raw_body == body
    assert err.error == "Invalid email format"
    assert "Invalid email format" in str(err)


def test_rate_limit_error_is_an_api_error() -> None:
    err = RateLimitExceededError.from_response(429, "", retry_after_seconds=12)

    assert isinstance(err, LoopsAPIError)
    assert err.retry_after_seconds == 12
    assert err.message == "HTTP 429"


def test_validation_error_is_a_value_error() -> None:
    err = LoopsValidationError("eventName is required and cannot be blank")

    assert isinstance(err, ValueError)
    assert isinstance(err, LoopsError)
    assert not isinstance(err, LoopsAPIError)
