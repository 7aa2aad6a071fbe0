"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    AllowanceConfig,
    ConfigurationError,
    TaxBracket,
    TaxSchedule,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SCHEDULE_FILE = CONFIG_DIRECTORY / "schedule.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_tax_schedule() -> TaxSchedule:
    """Load and cache the packaged tax schedule."""

    if not SCHEDULE_FILE.exists():
        raise FileNotFoundError(f"Tax schedule not found: {SCHEDULE_FILE.name}")

    raw_schedule = _load_yaml(SCHEDULE_FILE)

    try:
        return TaxSchedule.model_validate(raw_schedule)
    except ValidationError as error:
        raise ConfigurationError(f"Tax schedule validation failed: {error}") from error


__all__ = [
    "AllowanceConfig",
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "SCHEDULE_FILE",
    "TaxBracket",
    "TaxSchedule",
    "load_tax_schedule",
]
