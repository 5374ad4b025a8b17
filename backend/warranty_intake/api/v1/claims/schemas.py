"""API schemas for the claims endpoint."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from warranty_intake.models.claim import ClaimResult
from warranty_intake.models.enums import NotificationStatus
from warranty_intake.services.claims.content import response_message


class ClaimResponse(BaseModel):
    """Successful submission. Serialized with camelCase keys for the form frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ok: bool = True
    claim_number: int
    ref: str
    contact_id: str | None
    ticket_id: str | None
    email_status: NotificationStatus
    message: str

    @classmethod
    def from_result(cls, result: ClaimResult) -> "ClaimResponse":
        """Create response from a coordinator ClaimResult."""
        return cls(
            claim_number=result.claim_number,
            ref=result.ref,
            contact_id=result.crm_contact_id,
            ticket_id=result.crm_ticket_id,
            email_status=result.notification_status,
            message=response_message(result.notification_status),
        )


class ErrorResponse(BaseModel):
    """Rejected submission."""

    ok: bool = False
    errors: list[str]
