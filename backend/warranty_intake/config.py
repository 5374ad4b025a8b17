"""Application configuration using pydantic-settings."""

import json

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = (
    "http://127.0.0.1:5500,"  # VS Code Live Server (dev)
    "https://boatmateparts.com,"
    "https://www.boatmateparts.com,"
    "http://boatmateparts.com,"
    "http://www.boatmateparts.com"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),  # Load root .env first, then backend/.env (overrides)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./claims.db"

    # Claim counter
    claim_counter_name: str = "global"
    claim_number_seed: int = 100000

    # HubSpot
    hubspot_token: str = ""
    hubspot_base_url: str = "https://api.hubapi.com"
    hs_ticket_pipeline: str = "760934225"
    hs_ticket_stage: str = "1108043102"

    # Brevo transactional email
    email_enabled: bool = False
    email_api_endpoint: str = "https://api.brevo.com/v3/smtp/email"
    email_api_key: str = ""
    from_email: str = ""
    from_name: str = ""
    reply_to: str = ""

    # Application
    debug: bool = False
    log_level: str = "info"

    # CORS allow-list - stored as string to avoid pydantic-settings JSON parsing
    # Supports comma-separated values or JSON array format
    allowed_origins_str: str = Field(
        default=DEFAULT_ALLOWED_ORIGINS,
        validation_alias="ALLOWED_ORIGINS",
    )
    # Return "*" for origins outside the allow-list (early development only)
    cors_dev_fallback_star: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from string (comma-separated or JSON array)."""
        v = self.allowed_origins_str
        if not v:
            return []
        if v.startswith("["):
            result: list[str] = json.loads(v)
            return result
        return [origin.strip() for origin in v.split(",") if origin.strip()]


settings = Settings()
