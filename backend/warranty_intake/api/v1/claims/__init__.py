"""Claims API package."""

from warranty_intake.api.v1.claims.routes import router, submit_claim

__all__ = ["router", "submit_claim"]
