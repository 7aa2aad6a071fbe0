"""Unit tests for allowance aggregation."""

from __future__ import annotations

import pytest

from thaitax.backend.models import AllowanceInput
from thaitax.backend.services.calculators import (
    calculate_donation_deduction,
    derive_taxable_income,
)

CAP = 100_000


def _donation(amount: int, allowance_type: str = "donation") -> AllowanceInput:
    return AllowanceInput(allowanceType=allowance_type, amount=amount)


def test_donations_are_capped_in_total() -> None:
    allowances = [_donation(80_000), _donation(50_000)]

    assert calculate_donation_deduction(allowances, CAP) == 100_000


def test_single_large_donation_is_capped() -> None:
    assert calculate_donation_deduction([_donation(250_000)], CAP) == CAP


@pytest.mark.parametrize("allowance_type", ["donation", "DONATION", "  Donation  "])
def test_donation_type_is_normalised(allowance_type: str) -> None:
    allowances = [_donation(20_000, allowance_type)]

    assert calculate_donation_deduction(allowances, CAP) == 20_000


def test_non_positive_and_unknown_entries_are_ignored() -> None:
    allowances = [
        _donation(-5_000),
        _donation(0),
        _donation(30_000, "k-receipt"),
        _donation(30_000, ""),
        _donation(10_000),
    ]

    assert calculate_donation_deduction(allowances, CAP) == 10_000


def test_empty_allowances_yield_no_deduction() -> None:
    assert calculate_donation_deduction([], CAP) == 0


def test_deduction_stays_within_bounds_for_many_entries() -> None:
    allowances = [_donation(amount) for amount in (-1, 99_999, 3, 1, -100_000, 7)]

    deduction = calculate_donation_deduction(allowances, CAP)

    assert 0 <= deduction <= CAP
    assert deduction == CAP


def test_taxable_income_is_floored_at_zero() -> None:
    assert derive_taxable_income(60_000, 60_000, 0) == 0
    assert derive_taxable_income(100_000, 60_000, 100_000) == 0
    assert derive_taxable_income(500_000, 60_000, 20_000) == 420_000
