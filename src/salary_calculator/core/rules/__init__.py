"""Reference rates for salary conversion."""

from salary_calculator.core.rules.rate_constants import (
    ADDITIONAL_HEALTH_INSURANCE_RATE,
    ALLOWANCE,
    HEALTH_INSURANCE_RATE,
    PENSION_AND_DISABILITY_RATE,
    TAX_RATE,
    UNEMPLOYMENT_INSURANCE_RATE,
)

__all__ = [
    "ADDITIONAL_HEALTH_INSURANCE_RATE",
    "ALLOWANCE",
    "HEALTH_INSURANCE_RATE",
    "PENSION_AND_DISABILITY_RATE",
    "TAX_RATE",
    "UNEMPLOYMENT_INSURANCE_RATE",
]
