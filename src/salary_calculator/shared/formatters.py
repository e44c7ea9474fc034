"""Value formatters for display."""

import math


def format_amount(value: float, decimals: int = 2) -> str:
    """
    Format an amount with thousands separators.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "43,213.20"
    """
    if not math.isfinite(value):
        return str(value)

    # Handle negative values
    negative = value < 0
    formatted = f"{abs(value):,.{decimals}f}"
    return f"-{formatted}" if negative and formatted.strip("0.,") else formatted


def format_rate(rate: float, decimals: int = 1) -> str:
    """
    Format a decimal fraction as percentage.

    Args:
        rate: Decimal rate (e.g., 0.188 for 18.8%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "18.8%"
    """
    return f"{rate * 100:.{decimals}f}%"
