"""Submission, Claim and ClaimResult value objects."""

import uuid
from dataclasses import dataclass, field

from warranty_intake.models.enums import NotificationStatus

DEFAULT_CATEGORY = "Warranty"


def _ref() -> str:
    """Generate a new trace reference."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Submission:
    """Validated warranty submission.

    `ref` identifies the request in logs only; it is never an authoritative
    identifier for the caller.
    """

    vin: str
    email: str
    category: str = DEFAULT_CATEGORY
    ref: str = field(default_factory=_ref)


@dataclass(frozen=True)
class Claim:
    """A submission bound to an allocated claim number."""

    claim_number: int
    submission: Submission


@dataclass(frozen=True)
class ClaimResult:
    """Outcome of handling one submission."""

    claim: Claim
    crm_contact_id: str | None
    crm_ticket_id: str | None
    notification_status: NotificationStatus

    @property
    def claim_number(self) -> int:
        return self.claim.claim_number

    @property
    def ref(self) -> str:
        return self.claim.submission.ref
