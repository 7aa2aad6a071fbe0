"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

__all__ = [
    "AllowanceInput",
    "CalculationRequest",
    "TaxLevelEntry",
    "CalculationResponse",
    "format_validation_error",
    "INVALID_BODY_ERROR",
]


INVALID_BODY_ERROR = "invalid JSON body"

# Amounts are 64-bit signed integers on the wire.
AMOUNT_MIN = -(2**63)
AMOUNT_MAX = 2**63 - 1


class AllowanceInput(BaseModel):
    """Single allowance entry claimed by the taxpayer."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    allowance_type: str = Field(default="", alias="allowanceType", strict=True)
    amount: int = Field(default=0, strict=True, ge=AMOUNT_MIN, le=AMOUNT_MAX)

    @field_validator("allowance_type", mode="before")
    @classmethod
    def _default_missing_type(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("amount", mode="before")
    @classmethod
    def _default_missing_amount(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def normalised_type(self) -> str:
        return self.allowance_type.strip().lower()


class CalculationRequest(BaseModel):
    """Complete payload accepted by the calculation endpoint.

    Amounts are whole 64-bit currency units. Sign checks (negative income or
    withholding) are left to the calculation service so that
    they are reported one at a time in a fixed order.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    total_income: int = Field(
        default=0, alias="totalIncome", strict=True, ge=AMOUNT_MIN, le=AMOUNT_MAX
    )
    withholding_tax: int = Field(
        default=0, alias="wht", strict=True, ge=AMOUNT_MIN, le=AMOUNT_MAX
    )
    allowances: list[AllowanceInput] = Field(default_factory=list)

    @field_validator("total_income", "withholding_tax", mode="before")
    @classmethod
    def _default_missing_amounts(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("allowances", mode="before")
    @classmethod
    def _normalise_allowances(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # A null entry decodes to an empty allowance that deducts nothing.
            return [{} if entry is None else entry for entry in value]
        return value


class TaxLevelEntry(BaseModel):
    """Tax charged within a single bracket."""

    model_config = ConfigDict(extra="forbid")

    level: str
    tax: int


class CalculationResponse(BaseModel):
    """Full response payload produced by the calculation service."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tax: int
    tax_level: list[TaxLevelEntry] = Field(alias="taxLevel")


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of payload issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"{INVALID_BODY_ERROR}: {details}"
