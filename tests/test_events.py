import pytest
import responses
from responses import matchers

from loops import LoopsValidationError, RateLimitExceededError


def test_send_event(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.POST,
        f"{base_url}/events/send",
        json={"success": True},
        match=[
            matchers.json_params_matcher(
                {"email": "user@example.com", "eventName": "signup", "eventProperties": {"plan": "pro"}}
            )
        ],
    )

    result = client.events.send(
        {"email": "user@example.com", "eventName": "signup", "eventProperties": {"plan": "pro"}}
    )

    assert result == {"success": True}
    assert "Idempotency-Key" not in mock_responses.calls[0].request.headers


def test_send_event_with_idempotency_key(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.POST,
        f"{base_url}/events/send",
        json={"success": True},
        match=[matchers.header_matcher({"Idempotency-Key": "key-1"})],
    )

    client.events.send({"email": "user@example.com", "eventName": "signup"}, idempotency_key="key-1")


def test_rate_limited(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.POST,
        f"{base_url}/events/send",
        json={"error": "Rate limit exceeded"},
        status=429,
        headers={"Retry-After": "60"},
    )

    with pytest.raises(RateLimitExceededError) as exc:
        client.events.send({"email": "user@example.com", "eventName": "signup"})

    assert exc.value.retry_after_seconds == 60
    assert exc.value.status_code == 429


def test_rate_limited_async(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.POST,
        f"{base_url}/events/send",
        json={"error": "Rate limit exceeded"},
        status=429,
    )

    future = client.events.send_async({"email": "user@example.com", "eventName": "signup"})

    exc = future.exception(timeout=5)
    assert isinstance(exc, RateLimitExceededError)
    assert exc.retry_after_seconds == 0


@pytest.mark.parametrize("payload", [{"email": "user@example.com"}, {"eventName": ""}, {"eventName": "  "}])
def test_event_name_required(client, payload) -> None:
    with pytest.raises(LoopsValidationError, match="eventName is required"):
        client.events.send(payload)


def test_idempotency_key_too_long_raises_before_async_dispatch(client) -> None:
    with pytest.raises(LoopsValidationError, match="Idempotency key must not exceed 100 characters"):
        client.events.send_async({"eventName": "signup"}, idempotency_key="k" * 101)


def test_idempotency_key_at_limit_is_accepted(client, mock_responses, base_url) -> None:
    mock_responses.add(responses.POST, f"{base_url}/events/send", json={"success": True})

    client.events.send({"eventName": "signup", "userId": "u-1"}, idempotency_key="k" * 100)

    assert mock_responses.calls[0].request.headers["Idempotency-Key"] == "k" * 100
