"""Main Typer application for Salary Calculator."""

import json
from pathlib import Path
from typing import Annotated, Optional, Union

import typer
from loguru import logger
from rich.panel import Panel
from rich.table import Table

from salary_calculator import __version__
from salary_calculator.cli.console import console, print_error, print_warning
from salary_calculator.core.calculators import (
    calculate_salary,
    calculate_threshold,
    get_total_contribution_rate,
)
from salary_calculator.core.models import (
    ContributionKind,
    GrossSalary,
    NetSalary,
    RateConfiguration,
    SalaryBreakdown,
)
from salary_calculator.shared.config import RATES_FILE_ENV, resolve_rates
from salary_calculator.shared.exceptions import SalaryCalculatorError
from salary_calculator.shared.formatters import format_amount, format_rate
from salary_calculator.shared.logging_config import configure_logging
from salary_calculator.shared.validators import (
    ensure_valid_amount,
    ensure_valid_rates,
    validate_rates,
)

app = typer.Typer(
    name="salary-calculator",
    help="Gross/net salary calculator for a flat-tax regime",
    add_completion=True,
    no_args_is_help=True,
)

OUTPUT_FORMATS = ("table", "plain", "json")

CONTRIBUTION_LABELS = {
    ContributionKind.PENSION_AND_DISABILITY: "Pension and disability insurance",
    ContributionKind.HEALTH_INSURANCE: "Health insurance",
    ContributionKind.ADDITIONAL_HEALTH_INSURANCE: "Additional health insurance",
    ContributionKind.UNEMPLOYMENT_INSURANCE: "Unemployment insurance",
}

RatesFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--rates-file",
        "-r",
        help="JSON file with the rate configuration",
        envvar=RATES_FILE_ENV,
        dir_okay=False,
    ),
]
PensionOption = Annotated[
    Optional[float],
    typer.Option("--pension", help="Pension and disability insurance rate (e.g. 0.188)"),
]
HealthOption = Annotated[
    Optional[float],
    typer.Option("--health", help="Health insurance rate"),
]
AdditionalHealthOption = Annotated[
    Optional[float],
    typer.Option("--additional-health", help="Additional health insurance rate"),
]
UnemploymentOption = Annotated[
    Optional[float],
    typer.Option("--unemployment", help="Unemployment insurance rate"),
]
TaxOption = Annotated[
    Optional[float],
    typer.Option("--tax", help="Flat income tax rate (e.g. 0.1)"),
]
AllowanceOption = Annotated[
    Optional[float],
    typer.Option("--allowance", help="Amount exempt from income tax"),
]
OutputOption = Annotated[
    str,
    typer.Option("--output", "-o", help="Output format: table, plain, json"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Show debug logs on stderr"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Salary Calculator v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show the version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Salary Calculator - convert between gross and net salary."""
    pass


@app.command()
def gross(
    amount: Annotated[float, typer.Argument(help="Gross salary to convert to net")],
    rates_file: RatesFileOption = None,
    pension: PensionOption = None,
    health: HealthOption = None,
    additional_health: AdditionalHealthOption = None,
    unemployment: UnemploymentOption = None,
    tax: TaxOption = None,
    allowance: AllowanceOption = None,
    output: OutputOption = "table",
    verbose: VerboseOption = False,
) -> None:
    """Calculate net salary and breakdown from a gross salary."""
    configure_logging(verbose)
    rates = _load_rates(
        rates_file, pension, health, additional_health, unemployment, tax, allowance
    )
    _convert(GrossSalary(amount=amount), rates, output)


@app.command()
def net(
    amount: Annotated[float, typer.Argument(help="Target net salary")],
    rates_file: RatesFileOption = None,
    pension: PensionOption = None,
    health: HealthOption = None,
    additional_health: AdditionalHealthOption = None,
    unemployment: UnemploymentOption = None,
    tax: TaxOption = None,
    allowance: AllowanceOption = None,
    output: OutputOption = "table",
    verbose: VerboseOption = False,
) -> None:
    """Calculate the gross salary needed for a target net salary."""
    configure_logging(verbose)
    rates = _load_rates(
        rates_file, pension, health, additional_health, unemployment, tax, allowance
    )
    _convert(NetSalary(amount=amount), rates, output)


@app.command("rates")
def show_rates(
    rates_file: RatesFileOption = None,
    pension: PensionOption = None,
    health: HealthOption = None,
    additional_health: AdditionalHealthOption = None,
    unemployment: UnemploymentOption = None,
    tax: TaxOption = None,
    allowance: AllowanceOption = None,
    output: OutputOption = "table",
    verbose: VerboseOption = False,
) -> None:
    """Show the active rate configuration and the tax threshold."""
    configure_logging(verbose)
    _check_output(output)
    try:
        rates = resolve_rates(
            rates_file,
            pension_and_disability=pension,
            health_insurance=health,
            additional_health_insurance=additional_health,
            unemployment_insurance=unemployment,
            tax=tax,
            allowance=allowance,
        )
    except SalaryCalculatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    threshold = calculate_threshold(rates)
    valid, reason = validate_rates(rates)

    if output == "json":
        print(json.dumps(
            {
                "rates": rates.model_dump(),
                "total_contribution_rate": get_total_contribution_rate(rates),
                "threshold": threshold.model_dump(),
                "valid": valid,
            },
            indent=2,
            default=str,
        ))
        return

    if output == "plain":
        for kind, rate in rates.contributions.items():
            print(f"{kind.value}: {rate}")
        print(f"total_contribution_rate: {get_total_contribution_rate(rates)}")
        print(f"tax: {rates.tax}")
        print(f"allowance: {rates.allowance}")
        print(f"threshold_gross: {threshold.gross}")
        print(f"threshold_net: {threshold.net}")
    else:
        table = Table(show_header=True, header_style="bold", title="Rate Configuration")
        table.add_column("Item", style="cyan")
        table.add_column("Value", justify="right")

        for kind, rate in rates.contributions.items():
            table.add_row(CONTRIBUTION_LABELS[kind], format_rate(rate))
        table.add_row(
            "[bold]Total contributions[/bold]",
            f"[bold]{format_rate(get_total_contribution_rate(rates))}[/bold]",
        )
        table.add_row("Income tax", format_rate(rates.tax))
        table.add_row("Allowance", format_amount(rates.allowance))
        table.add_row("Tax threshold (gross)", format_amount(threshold.gross))
        table.add_row("Tax threshold (net)", format_amount(threshold.net))

        console.print()
        console.print(table)

    if not valid:
        print_warning(reason)


def _check_output(output: str) -> None:
    """Reject unknown output formats."""
    if output not in OUTPUT_FORMATS:
        print_error(f"Unknown output format '{output}', use one of: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)


def _load_rates(
    rates_file: Optional[Path],
    pension: Optional[float],
    health: Optional[float],
    additional_health: Optional[float],
    unemployment: Optional[float],
    tax: Optional[float],
    allowance: Optional[float],
) -> RateConfiguration:
    """Resolve and validate the rate configuration for a conversion."""
    try:
        return ensure_valid_rates(
            resolve_rates(
                rates_file,
                pension_and_disability=pension,
                health_insurance=health,
                additional_health_insurance=additional_health,
                unemployment_insurance=unemployment,
                tax=tax,
                allowance=allowance,
            )
        )
    except SalaryCalculatorError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _convert(
    salary_input: Union[GrossSalary, NetSalary],
    rates: RateConfiguration,
    output: str,
) -> None:
    """Validate the amount, run the conversion and render the result."""
    _check_output(output)
    try:
        ensure_valid_amount(salary_input.amount)
    except SalaryCalculatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    breakdown = calculate_salary(salary_input, rates)
    logger.debug("{} {} -> {}", salary_input.kind, salary_input.amount, breakdown)

    if output == "json":
        print(json.dumps(breakdown.model_dump(), indent=2, default=str))
    elif output == "plain":
        _print_plain(breakdown)
    else:
        _print_table(salary_input, breakdown, rates)


def _print_plain(breakdown: SalaryBreakdown) -> None:
    """Print one "name: value" line per breakdown field."""
    print(f"gross: {format_amount(breakdown.gross)}")
    for kind, amount in breakdown.contributions.items():
        print(f"{kind.value}: {format_amount(amount)}")
    print(f"total_contributions: {format_amount(breakdown.contributions.total)}")
    print(f"taxable_base: {format_amount(breakdown.tax.taxable_base)}")
    print(f"income_tax: {format_amount(breakdown.tax.income_tax)}")
    print(f"net: {format_amount(breakdown.net)}")


def _print_table(
    salary_input: Union[GrossSalary, NetSalary],
    breakdown: SalaryBreakdown,
    rates: RateConfiguration,
) -> None:
    """Render the breakdown with rich."""
    direction = "Gross to Net" if isinstance(salary_input, GrossSalary) else "Net to Gross"

    console.print()
    console.print(
        Panel.fit(
            f"[header]Input:[/header] {salary_input.kind} {format_amount(salary_input.amount)}\n"
            f"[header]Contributions:[/header] {format_rate(get_total_contribution_rate(rates))}\n"
            f"[header]Income tax:[/header] {format_rate(rates.tax)} "
            f"above {format_amount(rates.allowance)}",
            title=f"Salary Calculator - {direction}",
            border_style="blue",
        )
    )

    contribution_rates = dict(rates.contributions.items())

    table = Table(show_header=True, header_style="bold")
    table.add_column("Item", style="cyan")
    table.add_column("Rate", justify="right")
    table.add_column("Amount", justify="right")

    table.add_row("[bold]Gross salary[/bold]", "", f"[value]{format_amount(breakdown.gross)}[/value]")
    for kind, amount in breakdown.contributions.items():
        table.add_row(
            CONTRIBUTION_LABELS[kind],
            format_rate(contribution_rates[kind]),
            f"[deduction]{format_amount(amount)}[/deduction]",
        )
    table.add_row(
        "Total contributions",
        format_rate(get_total_contribution_rate(rates)),
        f"[deduction]{format_amount(breakdown.contributions.total)}[/deduction]",
    )
    table.add_row("Gross after contributions", "", format_amount(breakdown.gross_after_contributions))
    table.add_row("Taxable base", "", format_amount(breakdown.tax.taxable_base))
    table.add_row(
        "Income tax",
        format_rate(rates.tax),
        f"[deduction]{format_amount(breakdown.tax.income_tax)}[/deduction]",
    )
    table.add_row("[bold]Net salary[/bold]", "", f"[amount]{format_amount(breakdown.net)}[/amount]")

    console.print(table)
