"""Enum definitions for claim models."""

from enum import StrEnum


class NotificationStatus(StrEnum):
    """Outcome of the confirmation email step."""

    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"
