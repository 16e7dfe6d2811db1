from decimal import Decimal, InvalidOperation

import click
from dotenv import load_dotenv

from .models import ValuationInput
from .services.valuation import ValuationService
from intrinsic_value.shared.exceptions import ValuationInputError

# Load environment variables from .env file
load_dotenv()


class DecimalParamType(click.ParamType):
    """Parses option values straight into Decimal, never through float."""
    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(value)
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid decimal number", param, ctx)


DECIMAL = DecimalParamType()


@click.group()
def valuation_cli():
    """CLI for the intrinsic value calculator."""
    pass


@valuation_cli.command()
@click.option('--fcf-last-year', type=DECIMAL, required=True, help="Most recent annual free cash flow.")
@click.option('--growth-rate', type=DECIMAL, required=True, help="FCF growth rate for the 10 year forecast, e.g. 0.15.")
@click.option('--discount-rate', type=DECIMAL, required=True, help="Required rate of return / WACC, e.g. 0.10.")
@click.option('--terminal-growth-rate', type=DECIMAL, required=True, help="Perpetual growth rate after the forecast.")
@click.option('--shares-outstanding', type=DECIMAL, required=True, help="Diluted share count.")
@click.option('--net-debt', type=DECIMAL, required=True, help="Total debt minus cash; negative for net cash.")
@click.option('--current-market-price', type=DECIMAL, required=True, help="Market price per share.")
@click.option('--show-breakdown', is_flag=True, help="Also print the intermediate DCF figures.")
def calculate(
    fcf_last_year: Decimal,
    growth_rate: Decimal,
    discount_rate: Decimal,
    terminal_growth_rate: Decimal,
    shares_outstanding: Decimal,
    net_debt: Decimal,
    current_market_price: Decimal,
    show_breakdown: bool,
):
    """
    Calculates the intrinsic value per share with a two-stage DCF model.
    """
    valuation_input = ValuationInput(
        fcf_last_year=fcf_last_year,
        growth_rate=growth_rate,
        discount_rate=discount_rate,
        terminal_growth_rate=terminal_growth_rate,
        shares_outstanding=shares_outstanding,
        net_debt=net_debt,
        current_market_price=current_market_price,
    )

    try:
        result = ValuationService().calculate(valuation_input)
    except ValuationInputError as e:
        raise click.ClickException(e.message)

    click.echo(f"Intrinsic value per share: {result.intrinsic_value_per_share} {result.currency}")
    click.echo(f"Market price: {current_market_price} {result.currency}")
    click.echo(f"Remark: {result.remark.value}")

    if show_breakdown and result.breakdown is not None:
        breakdown = result.breakdown
        click.echo("\n--- DCF Breakdown ---")
        for year, cash_flow in enumerate(breakdown.projected_cash_flows, start=1):
            click.echo(f"  Year {year:>2} FCF: {cash_flow:.4f}")
        click.echo(f"  Explicit period PV: {breakdown.explicit_period_value:.4f}")
        click.echo(f"  Terminal value: {breakdown.terminal_value:.4f}")
        click.echo(f"  Terminal value PV: {breakdown.terminal_value_present:.4f}")
        click.echo(f"  Enterprise value: {breakdown.enterprise_value:.4f}")
        click.echo(f"  Equity value: {breakdown.equity_value:.4f}")
        click.echo("---------------------")


if __name__ == '__main__':
    valuation_cli()
