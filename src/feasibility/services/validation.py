# src/feasibility/services/validation.py

from typing import Any

import pydantic

from feasibility.domain.evaluation import MIN_SQUARE_FEET, EvaluationRequest


class ValidationError(ValueError):
    """Caller-side mistake. Surfaced verbatim (HTTP 400 / CLI exit 2)."""


ADDRESS_REQUIRED = "Address is required"
SQUARE_FEET_TOO_SMALL = f"Square feet must be at least {MIN_SQUARE_FEET}"


def _to_num_optional(val: Any) -> float | None:
    """
    Lenient converter for the pre-checks.
    Returns None when missing/blank/garbage so the caller can reject it.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        s = val.strip()
        if not s:
            return None
        try:
            return float(s)
        except ValueError:
            return None
    return None


def _format_schema_error(err: pydantic.ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def validate_and_prepare_payload(raw: Any) -> EvaluationRequest:
    """
    Check the evaluation payload before anything expensive happens.

    The address and square-footage checks run first, with fixed messages, and
    never touch the geocoder. Remaining fields are then parsed into the typed
    request; schema failures are also caller errors.
    """
    if not isinstance(raw, dict):
        raise ValidationError("Invalid JSON body")

    # 1. Address
    address = raw.get("address")
    if not isinstance(address, str) or not address.strip():
        raise ValidationError(ADDRESS_REQUIRED)

    # 2. Square footage (hard minimum)
    options = raw.get("developmentOptions")
    if not isinstance(options, dict):
        options = {}
    sqft = _to_num_optional(options.get("squareFeet"))
    if not sqft or sqft < MIN_SQUARE_FEET:
        raise ValidationError(SQUARE_FEET_TOO_SMALL)

    # 3. Everything else
    try:
        return EvaluationRequest.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(_format_schema_error(e)) from e
