"""Domain-specific calculation helpers."""

from .allowances import calculate_donation_deduction, derive_taxable_income
from .progressive import calculate_progressive_tax, truncate_tax

__all__ = [
    "calculate_donation_deduction",
    "calculate_progressive_tax",
    "derive_taxable_income",
    "truncate_tax",
]
