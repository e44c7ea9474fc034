"""Salary input and breakdown models."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from salary_calculator.core.models.enums import ContributionKind, SalaryKind


class GrossSalary(BaseModel):
    """A gross amount to convert to net."""

    kind: Literal["gross"] = Field(default="gross", description="Input tag")
    amount: float = Field(..., description="Gross salary amount")

    model_config = {"frozen": True}


class NetSalary(BaseModel):
    """A target net amount to convert to gross."""

    kind: Literal["net"] = Field(default="net", description="Input tag")
    amount: float = Field(..., description="Target net salary amount")

    model_config = {"frozen": True}


SalaryInput = Annotated[Union[GrossSalary, NetSalary], Field(discriminator="kind")]

# Validates raw mappings such as {"kind": "net", "amount": 50000}
salary_input_adapter: TypeAdapter[Union[GrossSalary, NetSalary]] = TypeAdapter(SalaryInput)


def salary_input(kind: SalaryKind | str, amount: float) -> Union[GrossSalary, NetSalary]:
    """Build the input variant matching kind."""
    if SalaryKind(kind) is SalaryKind.GROSS:
        return GrossSalary(amount=amount)
    return NetSalary(amount=amount)


class ContributionsBreakdown(BaseModel):
    """Contribution amounts deducted from gross."""

    pension_and_disability: float = Field(..., description="Pension and disability insurance")
    health_insurance: float = Field(..., description="Health insurance")
    additional_health_insurance: float = Field(..., description="Additional health insurance")
    unemployment_insurance: float = Field(..., description="Unemployment insurance")
    total: float = Field(..., description="Sum of all contributions")

    def items(self) -> list[tuple[ContributionKind, float]]:
        """Return (kind, amount) pairs in display order."""
        return [(kind, getattr(self, kind.value)) for kind in ContributionKind]

    model_config = {"frozen": True}


class TaxBreakdown(BaseModel):
    """Income tax on post-contribution income."""

    taxable_base: float = Field(..., description="Income above the allowance, floored at 0")
    income_tax: float = Field(..., description="Tax on the taxable base")

    model_config = {"frozen": True}


class SalaryBreakdown(BaseModel):
    """Complete gross to net breakdown.

    net == gross - contributions.total - tax.income_tax for every breakdown
    the engine returns.
    """

    gross: float = Field(..., description="Gross salary")
    net: float = Field(..., description="Net salary")
    contributions: ContributionsBreakdown = Field(..., description="Contributions")
    tax: TaxBreakdown = Field(..., description="Income tax")

    @property
    def gross_after_contributions(self) -> float:
        """Gross minus total contributions."""
        return self.gross - self.contributions.total

    model_config = {"frozen": True}


class SalaryThreshold(BaseModel):
    """Salary level where the taxable base starts to rise above zero."""

    gross: float = Field(..., description="Gross salary at the threshold")
    net: float = Field(..., description="Net salary at the threshold")

    model_config = {"frozen": True}
