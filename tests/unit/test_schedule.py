"""Unit coverage for tax schedule loading and parsing."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from shutil import copy2

import pytest
import yaml
from pydantic import ValidationError

from thaitax.backend.config import schedule as schedule_module
from thaitax.backend.config.schema import ConfigurationError, TaxBracket


@pytest.fixture()
def isolated_schedule_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a temporary schedule file patched into the loader."""

    schedule_path = tmp_path / "schedule.yaml"
    copy2(schedule_module.SCHEDULE_FILE, schedule_path)

    monkeypatch.setattr(schedule_module, "SCHEDULE_FILE", schedule_path)
    schedule_module.load_tax_schedule.cache_clear()

    yield schedule_path

    schedule_module.load_tax_schedule.cache_clear()


def test_packaged_schedule_matches_published_rates() -> None:
    schedule = schedule_module.load_tax_schedule()

    assert schedule.allowances.personal == 60_000
    assert schedule.allowances.donation_cap == 100_000
    assert [b.rate for b in schedule.brackets] == [
        Decimal("0"),
        Decimal("0.1"),
        Decimal("0.15"),
        Decimal("0.2"),
        Decimal("0.35"),
    ]
    assert [b.lower_bound for b in schedule.brackets] == [
        0,
        150_001,
        500_001,
        1_000_001,
        2_000_001,
    ]
    assert schedule.brackets[-1].is_unbounded
    assert schedule.brackets[0].width == 150_001


def test_schedule_is_cached_and_immutable() -> None:
    first = schedule_module.load_tax_schedule()

    assert schedule_module.load_tax_schedule() is first
    with pytest.raises(ValidationError):
        first.brackets[0].rate = Decimal("0.5")  # type: ignore[misc]


def test_missing_schedule_file_raises(isolated_schedule_file: Path) -> None:
    isolated_schedule_file.unlink()

    with pytest.raises(FileNotFoundError):
        schedule_module.load_tax_schedule()


def test_non_mapping_schedule_is_rejected(isolated_schedule_file: Path) -> None:
    isolated_schedule_file.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        schedule_module.load_tax_schedule()


def test_negative_rate_is_rejected(isolated_schedule_file: Path) -> None:
    raw = yaml.safe_load(isolated_schedule_file.read_text(encoding="utf-8"))
    raw["brackets"][1]["rate"] = -0.1
    isolated_schedule_file.write_text(
        yaml.safe_dump(raw, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )

    with pytest.raises(ConfigurationError, match="validation failed"):
        schedule_module.load_tax_schedule()


def test_unknown_keys_are_rejected(isolated_schedule_file: Path) -> None:
    raw = yaml.safe_load(isolated_schedule_file.read_text(encoding="utf-8"))
    raw["surcharge"] = 0.05
    isolated_schedule_file.write_text(
        yaml.safe_dump(raw, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )

    with pytest.raises(ConfigurationError):
        schedule_module.load_tax_schedule()


def test_bracket_rate_keeps_decimal_precision() -> None:
    bracket = TaxBracket(label="mid", lower=0, upper=10, rate=0.15)

    assert bracket.rate == Decimal("0.15")
    assert bracket.width == 11


def test_currency_is_not_part_of_the_schedule(isolated_schedule_file: Path) -> None:
    raw = yaml.safe_load(isolated_schedule_file.read_text(encoding="utf-8"))
    assert "currency" not in raw
    raw["currency"] = "THB"
    isolated_schedule_file.write_text(
        yaml.safe_dump(raw, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )

    with pytest.raises(ConfigurationError):
        schedule_module.load_tax_schedule()
