import pytest
import responses
from responses import matchers

from loops import LoopsAPIError, LoopsValidationError


def test_mailing_lists(client, mock_responses, base_url) -> None:
    lists = [
        {"id": "l1", "name": "News", "description": None, "isPublic": True},
        {"id": "l2", "name": "Beta", "description": "Early access", "isPublic": False},
    ]
    mock_responses.add(responses.GET, f"{base_url}/lists", json=lists)

    assert client.mailing_lists.list() == lists
    assert mock_responses.calls[0].request.url == f"{base_url}/lists"


def test_dedicated_ips(client, mock_responses, base_url) -> None:
    mock_responses.add(responses.GET, f"{base_url}/dedicated-sending-ips", json=["1.2.3.4", "5.6.7.8"])

    assert client.dedicated_ips.list_async().result(timeout=5) == ["1.2.3.4", "5.6.7.8"]


def test_api_key_test(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.GET,
        f"{base_url}/api-key",
        json={"success": True, "teamName": "Acme"},
        match=[matchers.header_matcher({"Authorization": "Bearer test-api-key"})],
    )

    assert client.api_key.test()["teamName"] == "Acme"


def test_api_key_invalid(client, mock_responses, base_url) -> None:
    mock_responses.add(responses.GET, f"{base_url}/api-key", json={"error": "Invalid API key"}, status=401)

    with pytest.raises(LoopsAPIError) as exc:
        client.api_key.test()

    assert exc.value.status_code == 401
    assert exc.value.error == "Invalid API key"


def test_network_failure(client, mock_responses, base_url) -> None:
    mock_responses.add(responses.GET, f"{base_url}/api-key", body=ConnectionError("unreachable"))

    with pytest.raises(LoopsAPIError) as exc:
        client.api_key.test()

    assert exc.value.status_code is None
    assert exc.value.raw_body is None


def test_create_contact_property(client, mock_responses, base_url) -> None:
    mock_responses.add(
        responses.POST,
        f"{base_url}/contacts/properties",
        json={"success": True},
        match=[matchers.json_params_matcher({"name": "planName", "type": "string"})],
    )

    assert client.contact_properties.create({"name": "planName", "type": "string"}) == {"success": True}


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "PlanName", "type": "string"}, "camelCase"),
        ({"name": "plan_name", "type": "string"}, "camelCase"),
        ({"name": "planName", "type": "text"}, "type must be one of"),
        ({"name": "", "type": "string"}, "name is required"),
    ],
)
def test_contact_property_validation(client, payload, message: str) -> None:
    with pytest.raises(LoopsValidationError, match=message):
        client.contact_properties.create_async(payload)


def test_list_contact_properties(client, mock_responses, base_url) -> None:
    props = [{"key": "planName", "label": "Plan Name", "type": "string"}]
    mock_responses.add(
        responses.GET,
        f"{base_url}/contacts/properties",
        json=props,
        match=[matchers.query_param_matcher({"list": "custom"})],
    )

    assert client.contact_properties.list("custom") == props
