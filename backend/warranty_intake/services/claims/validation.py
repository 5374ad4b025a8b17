"""Submission normalization and validation."""

import re
from collections.abc import Mapping
from typing import Any

from warranty_intake.models.claim import DEFAULT_CATEGORY, Submission
from warranty_intake.services.exceptions import ClaimValidationError

# 17 characters, digits and capitals except I, O and Q
VIN_PATTERN = re.compile(r"^[A-HJ-NPR-Z0-9]{17}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

VIN_ERROR = "VIN must be 17 chars (no I, O, Q)."
EMAIL_ERROR = "Email is invalid."


def _field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return str(value).strip() if value else ""


def build_submission(data: Mapping[str, Any]) -> Submission:
    """Normalize raw request fields into a Submission.

    Accepts a decoded JSON object or form fields alike. VIN is uppercased,
    email lowercased, a blank category falls back to the default.

    Raises:
        ClaimValidationError: With one message per failed field check
    """
    vin = _field(data, "vin").upper()
    email = _field(data, "email")
    category = _field(data, "category") or DEFAULT_CATEGORY

    errors = []
    if not VIN_PATTERN.match(vin):
        errors.append(VIN_ERROR)
    if not EMAIL_PATTERN.match(email):
        errors.append(EMAIL_ERROR)
    if errors:
        raise ClaimValidationError(errors)

    return Submission(vin=vin, email=email.lower(), category=category)
