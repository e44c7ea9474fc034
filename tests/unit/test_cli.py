"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from salary_calculator import __version__
from salary_calculator.cli.app import app
from salary_calculator.shared.config import RATES_FILE_ENV

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks the CLI bound to the runner's streams."""
    yield
    logger.remove()
    logger.disable("salary_calculator")


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"Salary Calculator v{__version__}" in result.output


class TestGrossCommand:
    """Tests for the gross command."""

    def test_json_output(self):
        """Test JSON breakdown for the reference case."""
        result = runner.invoke(app, ["gross", "65000", "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["gross"] == 65000
        assert data["net"] == pytest.approx(43213.2)
        assert data["contributions"]["total"] == pytest.approx(18200)
        assert data["tax"]["taxable_base"] == pytest.approx(35868)

    def test_plain_output(self):
        """Test plain output lines."""
        result = runner.invoke(app, ["gross", "65000", "-o", "plain"])

        assert result.exit_code == 0
        assert "net: 43,213.20" in result.output
        assert "pension_and_disability: 12,220.00" in result.output
        assert "income_tax: 3,586.80" in result.output

    def test_table_output(self):
        """Test the rich table shows the breakdown."""
        result = runner.invoke(app, ["gross", "65000"])

        assert result.exit_code == 0
        assert "Net salary" in result.output
        assert "43,213.20" in result.output
        assert "Pension and disability insurance" in result.output

    def test_tax_override(self):
        """Test rate options change the result."""
        result = runner.invoke(app, ["gross", "65000", "--tax", "0.2", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["tax"]["income_tax"] == pytest.approx(7173.6)

    def test_negative_amount_rejected(self):
        """Test negative amounts fail at the boundary."""
        result = runner.invoke(app, ["gross", "--", "-100"])

        assert result.exit_code == 1
        assert "must not be negative" in result.output

    def test_nan_amount_rejected(self):
        """Test NaN fails at the boundary."""
        result = runner.invoke(app, ["gross", "nan"])

        assert result.exit_code == 1
        assert "finite" in result.output

    def test_invalid_rate_rejected(self):
        """Test out-of-range rates fail at the boundary."""
        result = runner.invoke(app, ["gross", "65000", "--tax", "1.5"])

        assert result.exit_code == 1
        assert "between 0 and 1" in result.output

    def test_unknown_output_format(self):
        """Test unknown output formats fail."""
        result = runner.invoke(app, ["gross", "65000", "-o", "xml"])

        assert result.exit_code == 1
        assert "Unknown output format" in result.output


class TestNetCommand:
    """Tests for the net command."""

    def test_json_output(self):
        """Test the derived gross reproduces the requested net."""
        result = runner.invoke(app, ["net", "50000", "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["net"] == pytest.approx(50000, abs=1e-5)
        assert data["gross"] > 50000

    def test_round_trip_reference(self):
        """Test net 43213.2 maps back to gross 65000."""
        result = runner.invoke(app, ["net", "43213.2", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["gross"] == pytest.approx(65000, abs=1e-5)

    def test_table_output(self):
        """Test the table title names the direction."""
        result = runner.invoke(app, ["net", "50000"])

        assert result.exit_code == 0
        assert "Net to Gross" in result.output

    def test_verbose_logs_branch(self):
        """Test --verbose shows the branch selection."""
        result = runner.invoke(app, ["net", "50000", "--verbose", "-o", "plain"])

        assert result.exit_code == 0
        assert "taxable zone" in result.output


class TestRatesFile:
    """Tests for --rates-file and its environment variable."""

    def test_rates_file_option(self, rates_file: Path):
        """Test rates are read from the file."""
        result = runner.invoke(
            app, ["gross", "65000", "--rates-file", str(rates_file), "-o", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["net"] == pytest.approx(39626.4)

    def test_rates_file_env(self, rates_file: Path):
        """Test the environment variable is honoured."""
        result = runner.invoke(
            app,
            ["gross", "65000", "-o", "json"],
            env={RATES_FILE_ENV: str(rates_file)},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["net"] == pytest.approx(39626.4)

    def test_missing_rates_file(self, tmp_path: Path):
        """Test a missing file is reported."""
        result = runner.invoke(
            app, ["gross", "65000", "--rates-file", str(tmp_path / "missing.json")]
        )

        assert result.exit_code == 1
        assert "not found" in result.output


class TestRatesCommand:
    """Tests for the rates command."""

    def test_json_output(self):
        """Test configuration and threshold as JSON."""
        result = runner.invoke(app, ["rates", "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["rates"]["tax"] == 0.1
        assert data["total_contribution_rate"] == pytest.approx(0.28)
        assert data["threshold"]["gross"] == pytest.approx(10932 / 0.72)
        assert data["threshold"]["net"] == pytest.approx(10932)
        assert data["valid"] is True

    def test_table_output(self):
        """Test the rates table."""
        result = runner.invoke(app, ["rates"])

        assert result.exit_code == 0
        assert "18.8%" in result.output
        assert "10,932.00" in result.output

    def test_invalid_rates_warn(self):
        """Test invalid configurations are shown with a warning."""
        result = runner.invoke(app, ["rates", "--tax", "0.95", "-o", "plain"])

        assert result.exit_code == 0
        assert "tax: 0.95" in result.output
        assert "Warning" in result.output
