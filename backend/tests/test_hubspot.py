"""Tests for the HubSpot CRM client."""

import json

import httpx
import pytest

from warranty_intake.services.exceptions import CrmError, DownstreamError
from warranty_intake.services.external.hubspot import HubSpotService


def make_service(handler, token: str = "pat-test") -> tuple[HubSpotService, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    service = HubSpotService(token, "https://api.hubapi.test", transport=httpx.MockTransport(recording_handler))
    return service, requests


@pytest.mark.asyncio
async def test_find_contact_by_email_returns_first_hit():
    service, requests = make_service(lambda r: httpx.Response(200, json={"results": [{"id": "501"}]}))

    contact_id = await service.find_contact_by_email("Owner@Example.com")

    assert contact_id == "501"
    request = requests[0]
    assert request.url.path == "/crm/v3/objects/contacts/search"
    assert request.headers["Authorization"] == "Bearer pat-test"
    body = json.loads(request.content)
    assert body["filterGroups"][0]["filters"][0] == {
        "propertyName": "email",
        "operator": "EQ",
        "value": "owner@example.com",
    }
    assert body["limit"] == 1


@pytest.mark.asyncio
async def test_find_contact_by_email_without_match():
    service, _ = make_service(lambda r: httpx.Response(200, json={"total": 0, "results": []}))

    assert await service.find_contact_by_email("owner@example.com") is None


@pytest.mark.asyncio
async def test_create_contact_posts_properties():
    service, requests = make_service(lambda r: httpx.Response(201, json={"id": "777"}))

    contact_id = await service.create_contact({"email": "owner@example.com"})

    assert contact_id == "777"
    assert requests[0].url.path == "/crm/v3/objects/contacts"
    assert json.loads(requests[0].content) == {"properties": {"email": "owner@example.com"}}


@pytest.mark.asyncio
async def test_create_ticket_returns_id():
    service, requests = make_service(lambda r: httpx.Response(201, json={"id": "9001"}))

    ticket_id = await service.create_ticket({"subject": "Warranty Claim #100001 - 1HGCM82633A123456"})

    assert ticket_id == "9001"
    assert requests[0].url.path == "/crm/v3/objects/tickets"


@pytest.mark.asyncio
async def test_error_response_raises_crm_error_with_hubspot_message():
    service, _ = make_service(
        lambda r: httpx.Response(400, json={"status": "error", "message": "Property values were not valid"})
    )

    with pytest.raises(CrmError, match="HubSpot error: Property values were not valid"):
        await service.create_ticket({"subject": "x"})


@pytest.mark.asyncio
async def test_error_response_without_json_body():
    service, _ = make_service(lambda r: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(CrmError, match="HubSpot 502: HTTP 502"):
        await service.create_contact({"email": "owner@example.com"})


@pytest.mark.asyncio
async def test_create_without_id_raises():
    service, _ = make_service(lambda r: httpx.Response(200, json={}))

    with pytest.raises(CrmError, match="Failed to create contact"):
        await service.create_contact({"email": "owner@example.com"})


@pytest.mark.asyncio
async def test_missing_token_raises_before_any_request():
    service, requests = make_service(lambda r: httpx.Response(200, json={"id": "1"}), token="")

    with pytest.raises(CrmError, match="HUBSPOT_TOKEN missing") as exc_info:
        await service.create_ticket({"subject": "x"})

    assert requests == []
    assert isinstance(exc_info.value, DownstreamError)


@pytest.mark.asyncio
async def test_ticket_create_is_not_retried_on_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service, requests = make_service(handler)

    with pytest.raises(CrmError, match="HubSpot request failed"):
        await service.create_ticket({"subject": "x"})

    assert len(requests) == 1
