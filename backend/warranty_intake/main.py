"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from warranty_intake.api.cors import EchoCORSMiddleware
from warranty_intake.api.v1 import claims, health
from warranty_intake.config import settings
from warranty_intake.db import dispose_engine, init_db
from warranty_intake.logging import setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting Warranty Intake API", debug=settings.debug)

    await init_db()
    logger.info(
        "Claim counter storage ready",
        counter=settings.claim_counter_name,
        seed=settings.claim_number_seed,
    )

    yield

    logger.info("Shutting down Warranty Intake API")
    await dispose_engine()
    logger.info("Database connections disposed")


app = FastAPI(
    title="Warranty Intake API",
    description="Warranty claim intake with sequential claim numbers, HubSpot tickets and Brevo confirmations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    EchoCORSMiddleware,
    allowed_origins=settings.allowed_origins,
    dev_fallback_star=settings.cors_dev_fallback_star,
)

# API routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(claims.router, prefix="/api/v1")

# Plain <form action="..."> posts target the service root
app.add_api_route("/", claims.submit_claim, methods=["POST"], include_in_schema=False)
