"""Confirmation email settings used by the intake pipeline."""

from dataclasses import dataclass

from warranty_intake.config import Settings


@dataclass(frozen=True)
class EmailConfig:
    """Settings needed to send a confirmation email."""

    enabled: bool
    endpoint: str
    api_key: str
    from_email: str
    from_name: str = ""
    reply_to: str = ""

    @property
    def is_configured(self) -> bool:
        """Sending is gated on the enabled flag plus endpoint, API key and sender."""
        return self.enabled and bool(self.endpoint and self.api_key and self.from_email)

    @classmethod
    def from_settings(cls, source: Settings) -> "EmailConfig":
        return cls(
            enabled=source.email_enabled,
            endpoint=source.email_api_endpoint,
            api_key=source.email_api_key,
            from_email=source.from_email,
            from_name=source.from_name,
            reply_to=source.reply_to,
        )
