"""Custom exceptions for Salary Calculator.

The conversion engine itself never raises; these are used at the boundary
(configuration loading, input validation, CLI).
"""


class SalaryCalculatorError(Exception):
    """Base exception for all Salary Calculator errors."""

    pass


class ConfigurationError(SalaryCalculatorError):
    """Rate configuration file missing, unreadable or malformed."""

    pass


class ValidationError(SalaryCalculatorError):
    """Input validation error."""

    pass


class AmountValidationError(ValidationError):
    """Invalid salary amount."""

    pass


class RateValidationError(ValidationError):
    """Invalid rate configuration."""

    pass
