"""FastAPI dependencies for service injection."""

from functools import cache
from typing import Annotated

from fastapi import Depends

from warranty_intake.config import settings
from warranty_intake.db import async_session_maker
from warranty_intake.services.claims.collaborators import ClaimNumberAllocator, CrmClient, Notifier
from warranty_intake.services.claims.config import EmailConfig
from warranty_intake.services.claims.coordinator import IntakeCoordinator
from warranty_intake.services.claims.sequencer import ClaimSequencer
from warranty_intake.services.external.brevo import BrevoEmailService
from warranty_intake.services.external.hubspot import HubSpotService


@cache
def get_sequencer() -> ClaimSequencer:
    """Get the process-wide ClaimSequencer (one instance per counter)."""
    return ClaimSequencer(
        async_session_maker,
        name=settings.claim_counter_name,
        seed=settings.claim_number_seed,
    )


def get_crm_service() -> HubSpotService:
    """Get a HubSpotService instance."""
    return HubSpotService()


def get_email_config() -> EmailConfig:
    return EmailConfig.from_settings(settings)


def get_notifier(config: Annotated[EmailConfig, Depends(get_email_config)]) -> BrevoEmailService:
    """Get a BrevoEmailService instance."""
    return BrevoEmailService(config)


def get_intake_coordinator(
    sequencer: Annotated[ClaimNumberAllocator, Depends(get_sequencer)],
    crm: Annotated[CrmClient, Depends(get_crm_service)],
    notifier: Annotated[Notifier, Depends(get_notifier)],
    email_config: Annotated[EmailConfig, Depends(get_email_config)],
) -> IntakeCoordinator:
    """Get an IntakeCoordinator wired to the configured collaborators."""
    return IntakeCoordinator(
        sequencer,
        crm,
        notifier,
        email_config,
        ticket_pipeline=settings.hs_ticket_pipeline,
        ticket_stage=settings.hs_ticket_stage,
    )


# Type aliases for cleaner endpoint signatures
IntakeCoordinatorDep = Annotated[IntakeCoordinator, Depends(get_intake_coordinator)]
