"""Progressive bracket calculator."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from thaitax.backend.models import BracketTax
from thaitax.backend.config.schedule import TaxBracket


def truncate_tax(portion: int, rate: Decimal) -> int:
    """Return ``portion * rate`` with any fractional unit discarded."""

    if portion < 0:
        raise ValueError("Bracket portions cannot be negative")

    # Integer arithmetic keeps the floor exact for amounts of any size.
    numerator, denominator = rate.as_integer_ratio()
    return portion * numerator // denominator


def calculate_progressive_tax(
    taxable_income: int, brackets: Sequence[TaxBracket]
) -> tuple[int, list[BracketTax]]:
    """Calculate progressive tax for ``taxable_income`` using ``brackets``.

    Bracket bounds are inclusive, so a bounded bracket absorbs
    ``upper - lower + 1`` units before the next one starts. Every bracket
    yields an entry in the returned breakdown, including those the income
    never reaches.
    """

    if taxable_income < 0:
        raise ValueError("Taxable income cannot be negative")

    total = 0
    levels: list[BracketTax] = []
    remaining = taxable_income

    for bracket in brackets:
        width = bracket.width
        portion = remaining if width is None else min(remaining, width)

        tax = truncate_tax(portion, bracket.rate) if portion > 0 else 0
        levels.append(BracketTax(label=bracket.label, tax=tax))

        total += tax
        remaining -= portion

    return total, levels


__all__ = ["calculate_progressive_tax", "truncate_tax"]
