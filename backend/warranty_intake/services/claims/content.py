"""Ticket, email and response text built from a claim."""

from dataclasses import dataclass
from html import escape

from warranty_intake.models.claim import Claim
from warranty_intake.models.enums import NotificationStatus

RESPONSE_MESSAGES = {
    NotificationStatus.SENT: "Submitted. Confirmation email sent.",
    NotificationStatus.FAILED: "Submitted. Email delivery is currently unavailable; we'll follow up.",
    NotificationStatus.SKIPPED: "Submitted. (Email not configured in this environment.)",
}


@dataclass(frozen=True)
class ConfirmationEmail:
    subject: str
    html_body: str
    text_body: str


def build_ticket_properties(claim: Claim, *, pipeline: str, stage: str) -> dict[str, str]:
    """HubSpot ticket properties. Keys must exist on the Ticket object in HubSpot."""
    submission = claim.submission
    return {
        "hs_pipeline": pipeline,
        "hs_pipeline_stage": stage,
        "subject": f"Warranty Claim #{claim.claim_number} - {submission.vin}",
        "content": (
            "Warranty intake\n"
            f"Claim #: {claim.claim_number}\n"
            f"VIN: {submission.vin}\n"
            f"Email: {submission.email}"
        ),
        "hs_ticket_category": submission.category,
        "trailer_vin": submission.vin,
    }


def build_confirmation_email(claim: Claim) -> ConfirmationEmail:
    submission = claim.submission
    html_body = (
        "<p>Thanks! We received your warranty request.</p>\n"
        f"<p><strong>Claim #:</strong> {claim.claim_number}</p>\n"
        f"<p><strong>VIN:</strong> {escape(submission.vin)}<br/>\n"
        f"   <strong>Email:</strong> {escape(submission.email)}<br/>\n"
        f"   <strong>Category:</strong> {escape(submission.category)}</p>\n"
        "<p>We'll follow up shortly.</p>\n"
    )
    text_body = (
        "Thanks!\n"
        f"Claim #: {claim.claim_number}\n"
        f"VIN: {submission.vin}\n"
        f"Email: {submission.email}\n"
        f"Category: {submission.category}"
    )
    return ConfirmationEmail(
        subject=f"Warranty request received - Claim #{claim.claim_number}",
        html_body=html_body,
        text_body=text_body,
    )


def response_message(status: NotificationStatus) -> str:
    return RESPONSE_MESSAGES[status]
