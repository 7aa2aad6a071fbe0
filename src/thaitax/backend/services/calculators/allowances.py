"""Allowance aggregation helpers.

Only donations are deductible at the moment. Other allowance types are
accepted on the wire but contribute nothing to the deduction.
"""

from __future__ import annotations

from collections.abc import Iterable

from thaitax.backend.models import AllowanceInput

DONATION = "donation"


def calculate_donation_deduction(allowances: Iterable[AllowanceInput], cap: int) -> int:
    """Return the donation deduction for ``allowances`` capped at ``cap``."""

    deduction = 0
    for allowance in allowances:
        if allowance.normalised_type != DONATION or allowance.amount <= 0:
            continue
        deduction += min(allowance.amount, cap)
        if deduction >= cap:
            return cap

    return deduction


def derive_taxable_income(total_income: int, personal_allowance: int, deduction: int) -> int:
    """Subtract allowances from ``total_income``, never going below zero."""

    taxable = total_income - personal_allowance - deduction
    return taxable if taxable > 0 else 0


__all__ = ["DONATION", "calculate_donation_deduction", "derive_taxable_income"]
