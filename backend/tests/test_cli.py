"""Tests for the intrinsic value command line interface."""
import pytest
from click.testing import CliRunner

from intrinsic_value.domains.valuation.cli import valuation_cli


BASE_ARGS = [
    "calculate",
    "--fcf-last-year", "1.1",
    "--growth-rate", "0.15",
    "--discount-rate", "0.10",
    "--terminal-growth-rate", "0.03",
    "--shares-outstanding", "122",
    "--net-debt", "0.5",
    "--current-market-price", "291.06",
]


@pytest.fixture
def runner():
    return CliRunner()


def _with(**overrides):
    args = list(BASE_ARGS)
    for option, value in overrides.items():
        flag = "--" + option.replace("_", "-")
        args[args.index(flag) + 1] = value
    return args


def test_calculate_prints_result(runner):
    result = runner.invoke(valuation_cli, BASE_ARGS)

    assert result.exit_code == 0, result.output
    assert "Intrinsic value per share: 318.91 USD" in result.output
    assert "Remark: Undervalued" in result.output
    assert "DCF Breakdown" not in result.output


def test_calculate_with_breakdown(runner):
    result = runner.invoke(valuation_cli, BASE_ARGS + ["--show-breakdown"])

    assert result.exit_code == 0, result.output
    assert "Year  1 FCF: 1.2650" in result.output
    assert "Year 10 FCF:" in result.output
    assert "Equity value:" in result.output


def test_calculate_accepts_net_cash(runner):
    args = [arg for arg in BASE_ARGS if arg not in ("--net-debt", "0.5")] + ["--net-debt=-0.5"]

    result = runner.invoke(valuation_cli, args)

    assert result.exit_code == 0, result.output
    assert "Intrinsic value per share: 327.11 USD" in result.output


def test_calculate_degenerate_rates_fails(runner):
    result = runner.invoke(valuation_cli, _with(discount_rate="0.03"))

    assert result.exit_code == 1
    assert "Discount rate and terminal growth rate cannot be equal." in result.output


def test_calculate_zero_shares_fails(runner):
    result = runner.invoke(valuation_cli, _with(shares_outstanding="0"))

    assert result.exit_code == 1
    assert "Shares outstanding must be greater than zero." in result.output


def test_calculate_rejects_non_decimal_option(runner):
    result = runner.invoke(valuation_cli, _with(growth_rate="fast"))

    assert result.exit_code == 2
    assert "is not a valid decimal number" in result.output
