"""Boundary validators for amounts and rate configurations.

The conversion engine accepts any number. These checks belong to the
callers that take user input, such as the CLI.
"""

import math

from salary_calculator.core.calculators import get_total_contribution_rate
from salary_calculator.core.models import RateConfiguration
from salary_calculator.shared.exceptions import (
    AmountValidationError,
    RateValidationError,
)


def validate_amount(amount: float) -> tuple[bool, str]:
    """Validate a salary amount.

    Args:
        amount: Gross or net amount entered by the user

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    if not math.isfinite(amount):
        return False, f"Amount must be a finite number, got {amount}"

    if amount < 0:
        return False, f"Amount must not be negative, got {amount}"

    return True, ""


def validate_rates(rates: RateConfiguration) -> tuple[bool, str]:
    """Validate a rate configuration.

    Every rate must lie in [0, 1], the allowance must be a non-negative
    finite amount, and contributions plus tax must stay below 100% so that
    the inverse conversion is well defined.

    Args:
        rates: Rate configuration to check

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    named_rates = [(kind.value, rate) for kind, rate in rates.contributions.items()]
    named_rates.append(("tax", rates.tax))

    for name, rate in named_rates:
        if not math.isfinite(rate):
            return False, f"Rate '{name}' must be a finite number, got {rate}"
        if not 0 <= rate <= 1:
            return False, f"Rate '{name}' must be between 0 and 1, got {rate}"

    if not math.isfinite(rates.allowance):
        return False, f"Allowance must be a finite number, got {rates.allowance}"

    if rates.allowance < 0:
        return False, f"Allowance must not be negative, got {rates.allowance}"

    combined = get_total_contribution_rate(rates) + rates.tax
    if combined >= 1:
        return False, f"Contributions plus tax must be below 100%, got {combined:.1%}"

    return True, ""


def ensure_valid_amount(amount: float) -> float:
    """Return amount unchanged or raise AmountValidationError."""
    valid, reason = validate_amount(amount)
    if not valid:
        raise AmountValidationError(reason)
    return amount


def ensure_valid_rates(rates: RateConfiguration) -> RateConfiguration:
    """Return rates unchanged or raise RateValidationError."""
    valid, reason = validate_rates(rates)
    if not valid:
        raise RateValidationError(reason)
    return rates
