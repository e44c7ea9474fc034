"""Domain models for salary conversion."""

from salary_calculator.core.models.enums import ContributionKind, SalaryKind
from salary_calculator.core.models.rates import (
    DEFAULT_RATES,
    ContributionRates,
    RateConfiguration,
)
from salary_calculator.core.models.salary import (
    ContributionsBreakdown,
    GrossSalary,
    NetSalary,
    SalaryBreakdown,
    SalaryInput,
    SalaryThreshold,
    TaxBreakdown,
    salary_input,
    salary_input_adapter,
)

__all__ = [
    "ContributionKind",
    "SalaryKind",
    "DEFAULT_RATES",
    "ContributionRates",
    "RateConfiguration",
    "ContributionsBreakdown",
    "GrossSalary",
    "NetSalary",
    "SalaryBreakdown",
    "SalaryInput",
    "SalaryThreshold",
    "TaxBreakdown",
    "salary_input",
    "salary_input_adapter",
]
