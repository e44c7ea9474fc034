"""Rate configuration models."""

from typing import Optional

from pydantic import BaseModel, Field

from salary_calculator.core.models.enums import ContributionKind
from salary_calculator.core.rules.rate_constants import (
    ADDITIONAL_HEALTH_INSURANCE_RATE,
    ALLOWANCE,
    HEALTH_INSURANCE_RATE,
    PENSION_AND_DISABILITY_RATE,
    TAX_RATE,
    UNEMPLOYMENT_INSURANCE_RATE,
)


class ContributionRates(BaseModel):
    """Employee contribution rates, each a decimal fraction of gross."""

    pension_and_disability: float = Field(
        default=PENSION_AND_DISABILITY_RATE,
        description="Pension and disability insurance rate",
    )
    health_insurance: float = Field(
        default=HEALTH_INSURANCE_RATE, description="Health insurance rate"
    )
    additional_health_insurance: float = Field(
        default=ADDITIONAL_HEALTH_INSURANCE_RATE,
        description="Additional health insurance rate",
    )
    unemployment_insurance: float = Field(
        default=UNEMPLOYMENT_INSURANCE_RATE,
        description="Unemployment insurance rate",
    )

    def items(self) -> list[tuple[ContributionKind, float]]:
        """Return (kind, rate) pairs in display order."""
        return [(kind, getattr(self, kind.value)) for kind in ContributionKind]

    model_config = {"frozen": True, "extra": "forbid"}


class RateConfiguration(BaseModel):
    """Contribution rates, flat tax rate and tax-free allowance.

    Values are not range-checked here. Negative rates, or contribution plus
    tax rates summing to 1 or more, give meaningless (non-finite or
    sign-inverted) results from the inverse conversion without raising.
    Use shared.validators.validate_rates at the boundary to reject them.
    """

    contributions: ContributionRates = Field(
        default_factory=ContributionRates, description="Employee contribution rates"
    )
    tax: float = Field(default=TAX_RATE, description="Flat income tax rate")
    allowance: float = Field(
        default=ALLOWANCE, description="Amount exempt from income tax"
    )

    def with_overrides(
        self,
        *,
        pension_and_disability: Optional[float] = None,
        health_insurance: Optional[float] = None,
        additional_health_insurance: Optional[float] = None,
        unemployment_insurance: Optional[float] = None,
        tax: Optional[float] = None,
        allowance: Optional[float] = None,
    ) -> "RateConfiguration":
        """Return a copy with the given values replaced.

        Arguments left as None keep their current value.
        """
        contribution_updates = {
            name: float(value)
            for name, value in (
                ("pension_and_disability", pension_and_disability),
                ("health_insurance", health_insurance),
                ("additional_health_insurance", additional_health_insurance),
                ("unemployment_insurance", unemployment_insurance),
            )
            if value is not None
        }
        updates: dict[str, object] = {
            "contributions": self.contributions.model_copy(update=contribution_updates)
        }
        if tax is not None:
            updates["tax"] = float(tax)
        if allowance is not None:
            updates["allowance"] = float(allowance)
        return self.model_copy(update=updates)

    model_config = {"frozen": True, "extra": "forbid"}


# Reference configuration used when callers do not supply their own
DEFAULT_RATES = RateConfiguration()
