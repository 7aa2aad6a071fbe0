"""Orchestrate request validation, allowance handling and tax calculation.

The service validates the decoded payload against the API models, applies the
business rules in a fixed order (the first violation is reported), derives the
taxable income and runs it through the progressive scale of the packaged tax
schedule. Routes call ``run_calculation`` and hand the result to the response
builder; ``calculate_tax`` returns the rendered body directly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from thaitax.backend.config.schedule import TaxSchedule, load_tax_schedule
from thaitax.backend.models import (
    CalculationRequest,
    TaxComputation,
    format_validation_error,
)

from .calculators import (
    calculate_donation_deduction,
    calculate_progressive_tax,
    derive_taxable_income,
)
from .response_builder import build_response_body

_LOGGER = logging.getLogger(__name__)

NEGATIVE_INCOME_ERROR = "totalIncome must be a positive number"
NEGATIVE_WHT_ERROR = "wht must be a positive number"
WHT_EXCEEDS_INCOME_ERROR = "wht cannot be greater than totalIncome"


class TaxValidationError(ValueError):
    """Raised when a well-formed payload violates a business rule."""


class InvalidPayloadError(TaxValidationError):
    """Raised when the payload does not match the expected shape or types."""


def _coerce_request(payload: Mapping[str, Any] | CalculationRequest) -> CalculationRequest:
    if isinstance(payload, CalculationRequest):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError("invalid JSON body: payload must be an object")
    try:
        return CalculationRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError(format_validation_error(exc)) from exc


def validate_request(request: CalculationRequest) -> None:
    """Raise ``TaxValidationError`` for the first rule ``request`` breaks."""

    if request.total_income < 0:
        raise TaxValidationError(NEGATIVE_INCOME_ERROR)
    if request.withholding_tax < 0:
        raise TaxValidationError(NEGATIVE_WHT_ERROR)
    if request.withholding_tax > request.total_income:
        raise TaxValidationError(WHT_EXCEEDS_INCOME_ERROR)


def compute_tax(
    request: CalculationRequest, schedule: TaxSchedule | None = None
) -> TaxComputation:
    """Derive taxable income and the bracket breakdown for ``request``."""

    if schedule is None:
        schedule = load_tax_schedule()
    allowances = schedule.allowances

    donation = calculate_donation_deduction(request.allowances, allowances.donation_cap)
    taxable_income = derive_taxable_income(
        request.total_income, allowances.personal, donation
    )
    total_tax, levels = calculate_progressive_tax(taxable_income, schedule.brackets)

    _LOGGER.debug(
        "taxable income %s (donation %s), tax %s before withholding %s",
        taxable_income,
        donation,
        total_tax,
        request.withholding_tax,
    )

    return TaxComputation(
        total_income=request.total_income,
        donation_deduction=donation,
        taxable_income=taxable_income,
        total_tax=total_tax,
        withholding_tax=request.withholding_tax,
        levels=tuple(levels),
    )


def run_calculation(
    payload: Mapping[str, Any] | CalculationRequest,
    schedule: TaxSchedule | None = None,
) -> TaxComputation:
    """Validate ``payload`` and compute its tax figures."""

    request_model = _coerce_request(payload)
    validate_request(request_model)

    return compute_tax(request_model, schedule)


def calculate_tax(
    payload: Mapping[str, Any] | CalculationRequest,
    schedule: TaxSchedule | None = None,
) -> dict[str, Any]:
    """Compute the tax response body for the provided payload."""

    return build_response_body(run_calculation(payload, schedule))


__all__ = [
    "InvalidPayloadError",
    "NEGATIVE_INCOME_ERROR",
    "NEGATIVE_WHT_ERROR",
    "TaxValidationError",
    "WHT_EXCEEDS_INCOME_ERROR",
    "calculate_tax",
    "compute_tax",
    "run_calculation",
    "validate_request",
]
