"""Enumerations for salary domain models."""

from enum import Enum


class SalaryKind(str, Enum):
    """Which side of the conversion an amount is given on."""

    GROSS = "gross"
    NET = "net"


class ContributionKind(str, Enum):
    """Employee-side contribution kinds.

    Values match the field names on ContributionRates and
    ContributionsBreakdown, in display order.
    """

    PENSION_AND_DISABILITY = "pension_and_disability"
    HEALTH_INSURANCE = "health_insurance"
    ADDITIONAL_HEALTH_INSURANCE = "additional_health_insurance"
    UNEMPLOYMENT_INSURANCE = "unemployment_insurance"
