"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from salary_calculator.core.models import (
    DEFAULT_RATES,
    ContributionRates,
    RateConfiguration,
)


@pytest.fixture
def rates() -> RateConfiguration:
    """Return the reference rate configuration."""
    return DEFAULT_RATES


@pytest.fixture
def exact_rates() -> RateConfiguration:
    """Return rates whose arithmetic is exact in binary floating point.

    Contributions total 25%, tax 25%, allowance 7500: the threshold sits at
    gross 10000 / net 7500 with no rounding anywhere.
    """
    return RateConfiguration(
        contributions=ContributionRates(
            pension_and_disability=0.125,
            health_insurance=0.125,
            additional_health_insurance=0.0,
            unemployment_insurance=0.0,
        ),
        tax=0.25,
        allowance=7500.0,
    )


@pytest.fixture
def rates_file(tmp_path: Path) -> Path:
    """Return path to a rate file that only changes the tax rate."""
    path = tmp_path / "rates.json"
    path.write_text(json.dumps({"tax": 0.2}), encoding="utf-8")
    return path
