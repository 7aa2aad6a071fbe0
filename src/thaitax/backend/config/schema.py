"""Pydantic models describing the tax schedule configuration schema."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class TaxBracket(ImmutableModel):
    """Represents a single progressive tax bracket with inclusive bounds."""

    label: str
    lower_bound: int = Field(alias="lower")
    upper_bound: int | None = Field(default=None, alias="upper")
    rate: Decimal

    @field_validator("rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> Decimal:
        # YAML hands floats over; go through ``str`` so 0.15 stays 0.15.
        if isinstance(value, bool):
            raise ConfigurationError("Tax rates must be numeric")
        try:
            return Decimal(str(value))
        except InvalidOperation as exc:
            raise ConfigurationError(f"Invalid tax rate: {value!r}") from exc

    @model_validator(mode="after")
    def _validate_values(self) -> Self:
        if not self.label.strip():
            raise ConfigurationError("Tax brackets require a display label")
        if self.rate < 0:
            raise ConfigurationError("Tax rates must be non-negative")
        if self.lower_bound < 0:
            raise ConfigurationError("Lower bounds must be non-negative")
        if self.upper_bound is not None and self.upper_bound < self.lower_bound:
            raise ConfigurationError("Upper bounds cannot be below the lower bound")
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    @property
    def width(self) -> int | None:
        """Number of whole currency units covered, ``None`` when unbounded."""

        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound + 1


class AllowanceConfig(ImmutableModel):
    """Fixed deductions applied before the progressive scale."""

    personal: int = Field(..., ge=0)
    donation_cap: int = Field(..., ge=0)


class TaxSchedule(ImmutableModel):
    """Complete tax schedule: allowances and the ordered bracket table."""

    allowances: AllowanceConfig
    brackets: tuple[TaxBracket, ...]

    @field_validator("brackets", mode="before")
    @classmethod
    def _coerce_brackets(cls, value: Any) -> Sequence[Any]:
        if isinstance(value, (list, tuple)):
            return tuple(value)
        raise ConfigurationError("Brackets must be provided as a list")

    @model_validator(mode="after")
    def _require_brackets(self) -> Self:
        if not self.brackets:
            raise ConfigurationError("At least one tax bracket is required")
        return self

    @computed_field
    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(bracket.label for bracket in self.brackets)


__all__ = [
    "AllowanceConfig",
    "ConfigurationError",
    "ImmutableModel",
    "TaxBracket",
    "TaxSchedule",
]
