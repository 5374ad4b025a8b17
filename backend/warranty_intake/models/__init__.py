"""Database models and claim value objects."""

from sqlmodel import SQLModel

from warranty_intake.models.claim import Claim, ClaimResult, Submission
from warranty_intake.models.claim_counter import ClaimCounter
from warranty_intake.models.enums import NotificationStatus

__all__ = [
    "SQLModel",
    "ClaimCounter",
    "Claim",
    "ClaimResult",
    "Submission",
    "NotificationStatus",
]
