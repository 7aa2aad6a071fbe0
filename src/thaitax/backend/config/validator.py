"""Utilities for validating the tax schedule and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

from .schedule import (
    AllowanceConfig,
    ConfigurationError,
    TaxBracket,
    TaxSchedule,
    load_tax_schedule,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_allowances(allowances: AllowanceConfig) -> list[str]:
    errors: list[str] = []

    if allowances.personal < 0:
        errors.append(
            _format_scope("allowances", "personal allowance must be non-negative")
        )
    if allowances.donation_cap < 0:
        errors.append(_format_scope("allowances", "donation cap must be non-negative"))

    return errors


def _validate_brackets(brackets: Sequence[TaxBracket]) -> list[str]:
    errors: list[str] = []

    if not brackets:
        errors.append(_format_scope("brackets", "no tax brackets defined"))
        return errors

    if brackets[0].lower_bound != 0:
        errors.append(
            _format_scope(
                "brackets",
                f"first bracket must start at 0, found {brackets[0].lower_bound}",
            )
        )

    if not brackets[-1].is_unbounded:
        errors.append(
            _format_scope("brackets", "the final bracket must not define an upper bound")
        )

    duplicates = [
        label for label, count in Counter(b.label for b in brackets).items() if count > 1
    ]
    if duplicates:
        errors.append(
            _format_scope("brackets", f"duplicate bracket labels detected: {sorted(duplicates)}")
        )

    for index, bracket in enumerate(brackets):
        scope = f"brackets[{index}]"

        if bracket.rate < 0 or bracket.rate > 1:
            errors.append(
                _format_scope(scope, f"rate {bracket.rate} must be between 0 and 1")
            )

        if index == len(brackets) - 1:
            continue

        if bracket.is_unbounded:
            errors.append(
                _format_scope(scope, "only the final bracket may omit its upper bound")
            )
            continue

        following = brackets[index + 1]
        expected_lower = bracket.upper_bound + 1
        if following.lower_bound != expected_lower:
            errors.append(
                _format_scope(
                    f"brackets[{index + 1}]",
                    (
                        f"lower bound {following.lower_bound} must follow the previous "
                        f"upper bound (expected {expected_lower})"
                    ),
                )
            )

        if following.rate < bracket.rate:
            errors.append(
                _format_scope(
                    f"brackets[{index + 1}]",
                    "rates must not decrease across brackets",
                )
            )

    return errors


def validate_tax_schedule(schedule: TaxSchedule) -> list[str]:
    """Return a list of human readable issues detected in ``schedule``."""

    errors: list[str] = []
    errors.extend(_validate_allowances(schedule.allowances))
    errors.extend(_validate_brackets(schedule.brackets))
    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description="Validate the packaged tax schedule and report any issues."
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    parser.parse_args(argv)

    try:
        schedule = load_tax_schedule()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"[schedule] failed to load configuration: {error}")
        return 1

    issues = validate_tax_schedule(schedule)
    if issues:
        print(f"[schedule] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print("[schedule] OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
