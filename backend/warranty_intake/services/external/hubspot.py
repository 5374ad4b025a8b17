"""HubSpot CRM v3 API client for contacts and tickets."""

from typing import Any

import httpx
import structlog

from warranty_intake.config import settings
from warranty_intake.services.exceptions import CrmError
from warranty_intake.utils.request_retry import RequestRetryConfig, get_request_retrying

logger = structlog.get_logger(__name__)

# Only the contact search is retried: creates are not idempotent
HUBSPOT_SEARCH_RETRY_CONFIG = RequestRetryConfig(max_attempts=3, min_wait=0.5, max_wait=4.0)


class HubSpotService:
    """Service for HubSpot contact lookup, contact creation and ticket creation.

    Authenticates with a Private App token (contacts + tickets write scopes).
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = settings.hubspot_token if token is None else token
        self._base_url = base_url or settings.hubspot_base_url
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        if not self._token:
            raise CrmError("HUBSPOT_TOKEN missing")

        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Bearer {self._token}"},
            transport=self._transport,
            timeout=10.0,
        )

    async def _post(self, path: str, payload: dict[str, Any], *, retry: bool = False) -> dict[str, Any]:
        """POST JSON to HubSpot and return the decoded body.

        Raises:
            CrmError: On network failure or a non-2xx response
        """
        async with self._get_client() as client:
            try:
                if retry:
                    async for attempt in get_request_retrying(HUBSPOT_SEARCH_RETRY_CONFIG):
                        with attempt:
                            if attempt.retry_state.attempt_number > 1:
                                logger.warning(
                                    "Retrying HubSpot request",
                                    path=path,
                                    attempt=attempt.retry_state.attempt_number,
                                )
                            response = await client.post(path, json=payload)
                else:
                    response = await client.post(path, json=payload)
            except httpx.RequestError as e:
                raise CrmError(f"HubSpot request failed: {e}") from e

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if response.text:
            try:
                decoded = response.json()
            except ValueError:
                decoded = None
            if isinstance(decoded, dict):
                body = decoded

        if not response.is_success:
            code = body.get("status") or response.status_code
            message = body.get("message") or body.get("error") or f"HTTP {response.status_code}"
            logger.error("HubSpot API error", status_code=response.status_code, message=message)
            raise CrmError(f"HubSpot {code}: {message}")

        return body

    async def find_contact_by_email(self, email: str) -> str | None:
        """Find a contact by email via the CRM search API.

        Returns:
            Contact ID or None if no contact matches
        """
        payload = {
            "filterGroups": [{"filters": [{"propertyName": "email", "operator": "EQ", "value": email.lower()}]}],
            "properties": ["email"],
            "limit": 1,
        }
        body = await self._post("/crm/v3/objects/contacts/search", payload, retry=True)
        results = body.get("results")
        if isinstance(results, list) and results:
            return str(results[0]["id"])
        return None

    async def create_contact(self, properties: dict[str, str]) -> str:
        """Create a contact and return its ID."""
        body = await self._post("/crm/v3/objects/contacts", {"properties": properties})
        contact_id = body.get("id")
        if not contact_id:
            raise CrmError("Failed to create contact")
        return str(contact_id)

    async def create_ticket(self, properties: dict[str, str]) -> str:
        """Create a ticket and return its ID. Each call creates a new ticket."""
        body = await self._post("/crm/v3/objects/tickets", {"properties": properties})
        ticket_id = body.get("id")
        if not ticket_id:
            raise CrmError("Failed to create ticket")
        return str(ticket_id)
