"""Claim intake services.

- sequencer: durable strictly increasing claim number allocation
- validation: request fields to a validated Submission
- coordinator: claim allocation followed by best-effort CRM and email
- content: ticket properties, confirmation email and response messages
- config: confirmation email gate shared by the coordinator and the email client
"""

from warranty_intake.services.claims.coordinator import IntakeCoordinator
from warranty_intake.services.claims.sequencer import ClaimSequencer
from warranty_intake.services.claims.validation import build_submission

__all__ = [
    "ClaimSequencer",
    "IntakeCoordinator",
    "build_submission",
]
