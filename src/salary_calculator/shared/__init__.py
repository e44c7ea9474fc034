"""Shared utilities for Salary Calculator."""

from salary_calculator.shared.config import load_rates, resolve_rates
from salary_calculator.shared.exceptions import (
    AmountValidationError,
    ConfigurationError,
    RateValidationError,
    SalaryCalculatorError,
    ValidationError,
)
from salary_calculator.shared.formatters import format_amount, format_rate
from salary_calculator.shared.validators import (
    ensure_valid_amount,
    ensure_valid_rates,
    validate_amount,
    validate_rates,
)

__all__ = [
    # Configuration
    "load_rates",
    "resolve_rates",
    # Exceptions
    "AmountValidationError",
    "ConfigurationError",
    "RateValidationError",
    "SalaryCalculatorError",
    "ValidationError",
    # Formatters
    "format_amount",
    "format_rate",
    # Validators
    "ensure_valid_amount",
    "ensure_valid_rates",
    "validate_amount",
    "validate_rates",
]
