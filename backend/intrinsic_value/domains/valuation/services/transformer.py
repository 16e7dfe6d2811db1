"""Conversion between the wire schemas and the engine's value records."""
from intrinsic_value.domains.valuation.models import ValuationInput, ValuationResult
from intrinsic_value.domains.valuation.schemas import IntrinsicValueData, IntrinsicValueRequest


def transform_to_input(request: IntrinsicValueRequest) -> ValuationInput:
    return ValuationInput(
        fcf_last_year=request.fcf_last_year,
        growth_rate=request.growth_rate,
        discount_rate=request.discount_rate,
        terminal_growth_rate=request.terminal_growth_rate,
        shares_outstanding=request.shares_outstanding,
        net_debt=request.net_debt,
        current_market_price=request.current_market_price,
    )


def transform_to_data(result: ValuationResult) -> IntrinsicValueData:
    return IntrinsicValueData(
        intrinsic_value=result.intrinsic_value_per_share,
        currency=result.currency,
        remarks=result.remark.value,
    )
