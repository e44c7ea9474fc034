"""Gross to net salary conversion and its inverse.

Contributions are a flat share of gross. Income tax is a flat rate on
post-contribution income above an allowance, so net as a function of gross is
piecewise linear with a single kink where the taxable base leaves zero. The
inverse picks the branch from the threshold and solves it in closed form.

All functions are pure and never raise for numeric input: negative, infinite
and NaN values flow through IEEE-754 arithmetic.
"""

import math

from loguru import logger

from salary_calculator.core.models.rates import DEFAULT_RATES, RateConfiguration
from salary_calculator.core.models.salary import (
    ContributionsBreakdown,
    GrossSalary,
    NetSalary,
    SalaryBreakdown,
    SalaryThreshold,
    TaxBreakdown,
)


def _divide(numerator: float, denominator: float) -> float:
    """Float division returning inf/nan instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def get_total_contribution_rate(rates: RateConfiguration = DEFAULT_RATES) -> float:
    """Sum the four employee contribution rates.

    Args:
        rates: Rate configuration

    Returns:
        Combined contribution rate as a decimal fraction
    """
    c = rates.contributions
    return (
        c.pension_and_disability
        + c.health_insurance
        + c.unemployment_insurance
        + c.additional_health_insurance
    )


def calculate_contributions(
    gross: float, rates: RateConfiguration = DEFAULT_RATES
) -> ContributionsBreakdown:
    """Calculate each contribution as gross times its rate.

    Negative gross yields negative contributions. The total is summed from
    the products in the same order as get_total_contribution_rate.

    Args:
        gross: Gross salary
        rates: Rate configuration

    Returns:
        Individual contribution amounts and their total
    """
    c = rates.contributions
    pension_and_disability = gross * c.pension_and_disability
    health_insurance = gross * c.health_insurance
    additional_health_insurance = gross * c.additional_health_insurance
    unemployment_insurance = gross * c.unemployment_insurance

    total = (
        pension_and_disability
        + health_insurance
        + unemployment_insurance
        + additional_health_insurance
    )

    return ContributionsBreakdown(
        pension_and_disability=pension_and_disability,
        health_insurance=health_insurance,
        additional_health_insurance=additional_health_insurance,
        unemployment_insurance=unemployment_insurance,
        total=total,
    )


def calculate_tax(
    gross_after_contributions: float, rates: RateConfiguration = DEFAULT_RATES
) -> TaxBreakdown:
    """Apply the allowance and flat tax rate.

    Args:
        gross_after_contributions: Gross salary minus total contributions
        rates: Rate configuration

    Returns:
        Taxable base (never negative) and income tax
    """
    above_allowance = gross_after_contributions - rates.allowance
    # max() would turn NaN into 0
    if math.isnan(above_allowance):
        taxable_base = above_allowance
    else:
        taxable_base = max(0.0, above_allowance)

    return TaxBreakdown(
        taxable_base=taxable_base,
        income_tax=taxable_base * rates.tax,
    )


def calculate_net_salary(
    gross: float, rates: RateConfiguration = DEFAULT_RATES
) -> SalaryBreakdown:
    """Convert gross salary to net with a full breakdown."""
    contributions = calculate_contributions(gross, rates)
    gross_after_contributions = gross - contributions.total
    tax = calculate_tax(gross_after_contributions, rates)
    net = gross_after_contributions - tax.income_tax

    return SalaryBreakdown(
        gross=gross,
        net=net,
        contributions=contributions,
        tax=tax,
    )


def calculate_threshold(rates: RateConfiguration = DEFAULT_RATES) -> SalaryThreshold:
    """Find the salary at which post-contribution income equals the allowance.

    Below this point no income tax applies and net is gross minus
    contributions.

    Args:
        rates: Rate configuration

    Returns:
        Gross and net salary at the threshold
    """
    retained = 1 - get_total_contribution_rate(rates)
    threshold_gross = _divide(rates.allowance, retained)
    return SalaryThreshold(gross=threshold_gross, net=retained * threshold_gross)


def calculate_gross_salary(
    net: float, rates: RateConfiguration = DEFAULT_RATES
) -> SalaryBreakdown:
    """Derive the gross salary that yields net, with a full breakdown.

    No-tax zone (net <= threshold net):
        gross = net / (1 - contribution_rate)
    Taxable zone:
        gross = (net - tax * allowance) / ((1 - contribution_rate) * (1 - tax))

    The breakdown comes from calculate_net_salary on the derived gross, so
    its net matches the requested one to floating-point precision.

    Args:
        net: Target net salary
        rates: Rate configuration

    Returns:
        Salary breakdown for the derived gross
    """
    retained = 1 - get_total_contribution_rate(rates)
    threshold = calculate_threshold(rates)

    if net <= threshold.net:
        logger.debug(
            "Net {} is within the no-tax zone (threshold net {})", net, threshold.net
        )
        gross = _divide(net, retained)
    else:
        logger.debug(
            "Net {} is in the taxable zone (threshold net {})", net, threshold.net
        )
        gross = _divide(net - rates.tax * rates.allowance, retained * (1 - rates.tax))

    return calculate_net_salary(gross, rates)


def calculate_salary(
    salary_input: GrossSalary | NetSalary, rates: RateConfiguration = DEFAULT_RATES
) -> SalaryBreakdown:
    """Dispatch to the forward or inverse conversion by input kind.

    Args:
        salary_input: GrossSalary or NetSalary
        rates: Rate configuration

    Returns:
        Salary breakdown
    """
    if isinstance(salary_input, GrossSalary):
        return calculate_net_salary(salary_input.amount, rates)
    return calculate_gross_salary(salary_input.amount, rates)
