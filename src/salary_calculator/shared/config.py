"""Rate configuration loading."""

from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from salary_calculator.core.models import DEFAULT_RATES, RateConfiguration
from salary_calculator.shared.exceptions import ConfigurationError

# Environment variable pointing to a JSON rate file
RATES_FILE_ENV = "SALARY_CALCULATOR_RATES_FILE"


def load_rates(path: Path) -> RateConfiguration:
    """Load a rate configuration from a JSON file.

    Keys missing from the file keep their reference values.

    Args:
        path: Path to JSON file

    Returns:
        Parsed rate configuration

    Raises:
        ConfigurationError: If the file cannot be read or does not match
            the RateConfiguration schema
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Rate file not found: {path}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read rate file {path}: {e}") from e

    try:
        rates = RateConfiguration.model_validate_json(content)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid rate file {path}:\n{e}") from e

    logger.debug("Loaded rates from {}: {}", path, rates)
    return rates


def resolve_rates(
    rates_file: Optional[Path] = None,
    *,
    pension_and_disability: Optional[float] = None,
    health_insurance: Optional[float] = None,
    additional_health_insurance: Optional[float] = None,
    unemployment_insurance: Optional[float] = None,
    tax: Optional[float] = None,
    allowance: Optional[float] = None,
) -> RateConfiguration:
    """Build the active configuration: file (or defaults) plus overrides."""
    base = load_rates(rates_file) if rates_file is not None else DEFAULT_RATES
    return base.with_overrides(
        pension_and_disability=pension_and_disability,
        health_insurance=health_insurance,
        additional_health_insurance=additional_health_insurance,
        unemployment_insurance=unemployment_insurance,
        tax=tax,
        allowance=allowance,
    )
