"""Salary conversion engine."""

from salary_calculator.core.calculators.salary import (
    calculate_contributions,
    calculate_gross_salary,
    calculate_net_salary,
    calculate_salary,
    calculate_tax,
    calculate_threshold,
    get_total_contribution_rate,
)

__all__ = [
    "calculate_contributions",
    "calculate_gross_salary",
    "calculate_net_salary",
    "calculate_salary",
    "calculate_tax",
    "calculate_threshold",
    "get_total_contribution_rate",
]
