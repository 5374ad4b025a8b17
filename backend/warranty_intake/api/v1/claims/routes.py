"""Warranty claim submission endpoint."""

from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from warranty_intake.api.v1.claims.dependencies import IntakeCoordinatorDep
from warranty_intake.api.v1.claims.schemas import ClaimResponse, ErrorResponse
from warranty_intake.services.claims.validation import build_submission
from warranty_intake.services.exceptions import AllocationError, ClaimValidationError

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["claims"])

INVALID_BODY_ERROR = "Invalid request body"
ALLOCATION_ERROR = "Could not allocate a claim number. Please try again."
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class InvalidRequestBody(Exception):
    """Request body could not be read as JSON or form data."""


async def read_submission_fields(request: Request) -> dict[str, Any]:
    """Decode a JSON (fetch) or form (<form> post) body into a flat mapping.

    Unparseable JSON counts as an empty object so field validation reports it.
    Any other content type, or none at all, is an unreadable body.
    """
    content_type = request.headers.get("content-type", "").lower()

    if "application/json" in content_type:
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    if not content_type.startswith(FORM_CONTENT_TYPES):
        raise InvalidRequestBody(f"Unsupported content type: {content_type or 'missing'}")

    try:
        form = await request.form()
    except (MultiPartException, StarletteHTTPException, ValueError) as e:
        raise InvalidRequestBody(str(e)) from e
    return dict(form)


def _error(errors: list[str], status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(errors=errors).model_dump(), status_code=status_code)


@router.post(
    "/claims",
    response_model=ClaimResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    operation_id="submitClaim",
)
async def submit_claim(request: Request, coordinator: IntakeCoordinatorDep) -> JSONResponse:
    """
    Submit a warranty claim.

    1. Parse the JSON or form body
    2. Validate VIN and email (400 with all messages on failure)
    3. Allocate the claim number (500 if that fails, no claim exists)
    4. Upsert the HubSpot contact, create the ticket, send the confirmation email

    Step 4 failures never fail the request; they show up as null IDs or emailStatus.
    """
    try:
        fields = await read_submission_fields(request)
    except InvalidRequestBody as e:
        logger.warning("Unreadable request body", error=str(e))
        return _error([INVALID_BODY_ERROR], 400)

    try:
        submission = build_submission(fields)
    except ClaimValidationError as e:
        logger.info("Submission rejected", errors=e.errors)
        return _error(e.errors, 400)

    with structlog.contextvars.bound_contextvars(ref=submission.ref):
        try:
            result = await coordinator.handle(submission)
        except AllocationError:
            return _error([ALLOCATION_ERROR], 500)

        logger.info(
            "Claim submitted",
            claim_number=result.claim_number,
            contact_id=result.crm_contact_id,
            ticket_id=result.crm_ticket_id,
            email_status=result.notification_status,
        )

    response = ClaimResponse.from_result(result)
    return JSONResponse(response.model_dump(mode="json", by_alias=True))
