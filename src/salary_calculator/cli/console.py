"""Rich console configuration for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Custom theme for Salary Calculator
THEME = Theme(
    {
        "warning": "yellow",
        "error": "red bold",
        "header": "bold blue",
        "value": "bold",
        "amount": "green",
        "deduction": "red",
    }
)

# Global console instance
console = Console(theme=THEME)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Error:[/error] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Warning:[/warning] {escape(message)}", highlight=False)
