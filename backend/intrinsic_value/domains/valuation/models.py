"""
Valuation Models

Immutable value records passed between validation and computation.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class Remark(str, Enum):
    """Intrinsic value relative to the current market price."""
    UNDERVALUED = "Undervalued"
    OVERVALUED = "Overvalued"
    FAIRLY_VALUED = "FairlyValued"


@dataclass(frozen=True)
class ValuationInput:
    """Raw caller input. Any field may be unset until validation."""
    fcf_last_year: Optional[Decimal] = None
    growth_rate: Optional[Decimal] = None
    discount_rate: Optional[Decimal] = None
    terminal_growth_rate: Optional[Decimal] = None
    shares_outstanding: Optional[Decimal] = None
    net_debt: Optional[Decimal] = None
    current_market_price: Optional[Decimal] = None


@dataclass(frozen=True)
class ValidatedInput:
    """Input that passed validation: every field is a finite decimal."""
    fcf_last_year: Decimal
    growth_rate: Decimal
    discount_rate: Decimal
    terminal_growth_rate: Decimal
    shares_outstanding: Decimal
    net_debt: Decimal
    current_market_price: Decimal


@dataclass(frozen=True)
class DcfBreakdown:
    """Intermediate figures of a single two-stage DCF run."""
    projected_cash_flows: Tuple[Decimal, ...]
    explicit_period_value: Decimal
    terminal_value: Decimal
    terminal_value_present: Decimal
    enterprise_value: Decimal
    equity_value: Decimal


@dataclass(frozen=True)
class ValuationResult:
    intrinsic_value_per_share: Decimal
    currency: str
    remark: Remark
    breakdown: Optional[DcfBreakdown] = field(default=None, compare=False)
