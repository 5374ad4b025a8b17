"""Intake coordinator: binds a submission to a claim number and notifies downstream systems."""

import asyncio

import structlog

from warranty_intake.models.claim import Claim, ClaimResult, Submission
from warranty_intake.models.enums import NotificationStatus
from warranty_intake.services.claims.collaborators import ClaimNumberAllocator, CrmClient, Notifier
from warranty_intake.services.claims.config import EmailConfig
from warranty_intake.services.claims.content import build_confirmation_email, build_ticket_properties

logger = structlog.get_logger(__name__)


class IntakeCoordinator:
    """Turns one validated Submission into one Claim.

    Step order is fixed:
    1. allocate the claim number (the only step that can fail the request)
    2. upsert the CRM contact by email
    3. create the CRM ticket
    4. send the confirmation email if configured

    Steps 2-4 are failure-isolated from each other and never give the claim
    number back: once allocated it is a permanent fact.
    """

    def __init__(
        self,
        sequencer: ClaimNumberAllocator,
        crm: CrmClient,
        notifier: Notifier,
        email_config: EmailConfig,
        *,
        ticket_pipeline: str,
        ticket_stage: str,
    ):
        self.sequencer = sequencer
        self.crm = crm
        self.notifier = notifier
        self.email_config = email_config
        self.ticket_pipeline = ticket_pipeline
        self.ticket_stage = ticket_stage

    async def handle(self, submission: Submission) -> ClaimResult:
        """Allocate a claim number and drive the best-effort side effects.

        Raises:
            AllocationError: If no claim number could be allocated
        """
        claim_number = await self.sequencer.allocate()
        claim = Claim(claim_number=claim_number, submission=submission)
        logger.info("Claim created", claim_number=claim_number, vin=submission.vin)

        # The claim is committed; let CRM and email finish even if the caller disconnects
        return await asyncio.shield(self._notify_downstream(claim))

    async def _notify_downstream(self, claim: Claim) -> ClaimResult:
        contact_id = await self._upsert_contact(claim.submission)
        ticket_id = await self._create_ticket(claim)
        notification_status = await self._send_confirmation(claim)

        return ClaimResult(
            claim=claim,
            crm_contact_id=contact_id,
            crm_ticket_id=ticket_id,
            notification_status=notification_status,
        )

    async def _upsert_contact(self, submission: Submission) -> str | None:
        """Find the contact by email, create it only when missing."""
        try:
            contact_id = await self.crm.find_contact_by_email(submission.email)
            if contact_id is None:
                contact_id = await self.crm.create_contact({"email": submission.email})
                logger.info("Created CRM contact", contact_id=contact_id)
            else:
                logger.info("Matched existing CRM contact", contact_id=contact_id)
            return contact_id
        except Exception as e:
            logger.error("CRM contact upsert failed", error=str(e))
            return None

    async def _create_ticket(self, claim: Claim) -> str | None:
        properties = build_ticket_properties(claim, pipeline=self.ticket_pipeline, stage=self.ticket_stage)
        try:
            ticket_id = await self.crm.create_ticket(properties)
            logger.info("Created CRM ticket", ticket_id=ticket_id, claim_number=claim.claim_number)
            return ticket_id
        except Exception as e:
            logger.error("CRM ticket create failed", error=str(e), claim_number=claim.claim_number)
            return None

    async def _send_confirmation(self, claim: Claim) -> NotificationStatus:
        if not self.email_config.is_configured:
            logger.debug("Confirmation email not configured, skipping")
            return NotificationStatus.SKIPPED

        email = build_confirmation_email(claim)
        try:
            sent = await self.notifier.send(
                claim.submission.email,
                email.subject,
                email.html_body,
                email.text_body,
            )
        except Exception as e:
            logger.error("Confirmation email failed", error=str(e), claim_number=claim.claim_number)
            return NotificationStatus.FAILED

        return NotificationStatus.SENT if sent else NotificationStatus.FAILED
