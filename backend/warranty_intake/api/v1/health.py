"""Health check endpoints."""

import structlog
from fastapi import APIRouter, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from warranty_intake.db import engine

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health", operation_id="healthCheck")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Fails with 503 when the claim counter database is unreachable."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check database ping failed", error=str(e))
        raise HTTPException(status_code=503, detail="Database unavailable") from e
    return {"status": "healthy"}
