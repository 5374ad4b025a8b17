"""Base service exceptions.

These exceptions are raised by the service layer and should be caught
by the API layer and converted to appropriate HTTP responses.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass


class ValidationError(ServiceError):
    """Validation error."""

    pass


class ClaimValidationError(ValidationError):
    """Submission failed field checks.

    Carries every human-readable message so the caller sees all problems at once.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class AllocationError(ServiceError):
    """Claim number could not be durably allocated.

    Fatal to the request: no claim exists when this is raised.
    """

    pass


class DownstreamError(ServiceError):
    """A best-effort integration (CRM, email) failed after the claim was committed."""

    pass


class CrmError(DownstreamError):
    """HubSpot CRM request failed."""

    pass
