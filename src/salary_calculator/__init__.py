"""Salary Calculator - gross/net salary conversion under a flat-tax regime."""

from loguru import logger

from salary_calculator.core.calculators import (
    calculate_contributions,
    calculate_gross_salary,
    calculate_net_salary,
    calculate_salary,
    calculate_tax,
    calculate_threshold,
    get_total_contribution_rate,
)
from salary_calculator.core.models import (
    DEFAULT_RATES,
    ContributionKind,
    ContributionRates,
    ContributionsBreakdown,
    GrossSalary,
    NetSalary,
    RateConfiguration,
    SalaryBreakdown,
    SalaryInput,
    SalaryKind,
    SalaryThreshold,
    TaxBreakdown,
    salary_input,
)

__version__ = "0.1.0"

# Silent when embedded; the CLI enables it through configure_logging
logger.disable("salary_calculator")

__all__ = [
    "__version__",
    "calculate_contributions",
    "calculate_gross_salary",
    "calculate_net_salary",
    "calculate_salary",
    "calculate_tax",
    "calculate_threshold",
    "get_total_contribution_rate",
    "DEFAULT_RATES",
    "ContributionKind",
    "ContributionRates",
    "ContributionsBreakdown",
    "GrossSalary",
    "NetSalary",
    "RateConfiguration",
    "SalaryBreakdown",
    "SalaryInput",
    "SalaryKind",
    "SalaryThreshold",
    "TaxBreakdown",
    "salary_input",
]
