"""Typed request/response models shared across the calculation services.

Pydantic models describe the wire format; the lightweight dataclasses below
carry derived results between the calculators and the calculation service.
"""

from __future__ import annotations

from dataclasses import dataclass

from .api import (
    INVALID_BODY_ERROR,
    AllowanceInput,
    CalculationRequest,
    CalculationResponse,
    TaxLevelEntry,
    format_validation_error,
)

__all__ = [
    "AllowanceInput",
    "BracketTax",
    "CalculationRequest",
    "CalculationResponse",
    "TaxComputation",
    "TaxLevelEntry",
    "format_validation_error",
    "INVALID_BODY_ERROR",
]


@dataclass(frozen=True, slots=True)
class BracketTax:
    """Tax attributed to one bracket of the progressive scale."""

    label: str
    tax: int

    def as_level(self) -> dict[str, int | str]:
        return {"level": self.label, "tax": self.tax}


@dataclass(frozen=True, slots=True)
class TaxComputation:
    """Intermediate figures derived while computing a single request."""

    total_income: int
    donation_deduction: int
    taxable_income: int
    total_tax: int
    withholding_tax: int
    levels: tuple[BracketTax, ...]

    @property
    def final_tax(self) -> int:
        # Negative values signal a refund and are passed through unchanged.
        return self.total_tax - self.withholding_tax
