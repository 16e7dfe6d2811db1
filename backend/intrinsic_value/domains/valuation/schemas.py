"""
Valuation API Schemas

Wire representation of intrinsic value requests and results.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from intrinsic_value.shared.response_models import APIResponse, CamelModel

# Decimals go out as exact strings; a JSON float would drop digits of large values
ExactDecimal = Annotated[Decimal, PlainSerializer(str, return_type=str, when_used="json")]


class IntrinsicValueRequest(CamelModel):
    """Request model for calculating the intrinsic value of a stock."""
    fcf_last_year: Decimal = Field(..., ge=0, description="Most recent annual free cash flow")
    growth_rate: Decimal = Field(..., description="Annual FCF growth rate for the forecast period")
    discount_rate: Decimal = Field(..., ge=0, description="Required rate of return / WACC")
    terminal_growth_rate: Decimal = Field(..., ge=0, description="Perpetual growth rate after the forecast")
    shares_outstanding: Decimal = Field(..., description="Diluted share count")
    net_debt: Decimal = Field(..., description="Total debt minus cash equivalents")
    current_market_price: Decimal = Field(..., ge=0, description="Observed market price per share")


class IntrinsicValueData(CamelModel):
    """Result payload of an intrinsic value calculation."""
    intrinsic_value: ExactDecimal = Field(..., description="Intrinsic value per share")
    currency: str = Field(..., description="Currency label of the intrinsic value")
    remarks: str = Field(..., description="Undervalued, Overvalued or FairlyValued")


class IntrinsicValueResponse(APIResponse):
    """Response envelope for intrinsic value calculations."""
    data: IntrinsicValueData
