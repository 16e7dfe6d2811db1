"""
Valuation Engine

Two-stage discounted cash flow model: a ten year explicit forecast of free
cash flow followed by a Gordon-growth terminal value. The engine is a pure
function of its input and holds no mutable state, so a single instance can
be shared by any number of concurrent callers.

All arithmetic is done in ``decimal.Decimal``; rounding to currency
precision (half-up) happens only on the final per-share figure.
"""
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional

from intrinsic_value.domains.valuation.config import (
    CALCULATION_PRECISION, CURRENCY_PRECISION, FORECAST_YEARS, VALUATION_INPUT_FIELDS
)
from intrinsic_value.domains.valuation.models import (
    DcfBreakdown, Remark, ValidatedInput, ValuationInput, ValuationResult
)
from intrinsic_value.shared.exceptions import (
    DegenerateRateError, InvalidFieldError, MissingFieldError,
    NonPositiveSharesError, NullInputError
)

logger = logging.getLogger(__name__)

ONE = Decimal(1)


def _to_decimal(field_name: str, value: Any) -> Decimal:
    """Read a field value as a finite decimal or raise InvalidFieldError."""
    if isinstance(value, bool):
        raise InvalidFieldError(field_name, value)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        # Shortest repr keeps 0.1 as Decimal("0.1") instead of the binary expansion
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidFieldError(field_name, value) from None
    else:
        raise InvalidFieldError(field_name, value)

    if not number.is_finite():
        raise InvalidFieldError(field_name, value)
    return number


class ValuationEngine:
    """
    Validates valuation input, runs the DCF and classifies the result.

    ``unit_scale`` multiplies equity value before it is divided by shares
    outstanding. The default of 1000 reads cash amounts (FCF, net debt) in
    billions and share counts in millions, so the per-share figure is not
    the raw equity/shares ratio. Pass ``unit_scale=1`` when all inputs are
    already in the same scale.
    """

    def __init__(self, currency: str = "USD", unit_scale: Decimal = Decimal("1000")):
        self._currency = currency
        self._unit_scale = Decimal(unit_scale)

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def unit_scale(self) -> Decimal:
        return self._unit_scale

    def validate(self, valuation_input: Optional[ValuationInput]) -> ValidatedInput:
        """
        Check the input and return it in validated form.

        Raises on the first failing rule, in this order: null input,
        missing fields, non-numeric fields, shares outstanding <= 0,
        discount rate equal to terminal growth rate.
        """
        if valuation_input is None:
            raise NullInputError()

        missing = [name for name in VALUATION_INPUT_FIELDS if getattr(valuation_input, name) is None]
        if missing:
            raise MissingFieldError(missing)

        values = {name: _to_decimal(name, getattr(valuation_input, name)) for name in VALUATION_INPUT_FIELDS}

        if values["shares_outstanding"] <= 0:
            raise NonPositiveSharesError(values["shares_outstanding"])

        # Exact comparison: a tie makes the terminal value undefined
        if values["discount_rate"] == values["terminal_growth_rate"]:
            raise DegenerateRateError(values["discount_rate"])

        return ValidatedInput(**values)

    def compute_intrinsic_value(self, validated: ValidatedInput) -> ValuationResult:
        """Run the two-stage DCF on validated input."""
        with localcontext() as ctx:
            ctx.prec = CALCULATION_PRECISION

            growth_factor = ONE + validated.growth_rate
            discount_base = ONE + validated.discount_rate

            # Discrete per-period compounding stays valid when growth exceeds the discount rate
            projected = []
            explicit_period_value = Decimal(0)
            cash_flow = validated.fcf_last_year
            for period in range(1, FORECAST_YEARS + 1):
                cash_flow = cash_flow * growth_factor
                projected.append(cash_flow)
                explicit_period_value += cash_flow / discount_base ** period

            # Negative when discount rate < terminal growth rate; allowed to propagate
            terminal_value = (
                projected[-1] * (ONE + validated.terminal_growth_rate)
                / (validated.discount_rate - validated.terminal_growth_rate)
            )
            terminal_value_present = terminal_value / discount_base ** FORECAST_YEARS

            enterprise_value = explicit_period_value + terminal_value_present
            equity_value = enterprise_value - validated.net_debt

            per_share = equity_value * self._unit_scale / validated.shares_outstanding

            # Quantizing needs every integer digit plus the cents to fit in the context
            ctx.prec = max(CALCULATION_PRECISION, per_share.adjusted() + 3)
            intrinsic_value_per_share = per_share.quantize(CURRENCY_PRECISION, rounding=ROUND_HALF_UP)

        breakdown = DcfBreakdown(
            projected_cash_flows=tuple(projected),
            explicit_period_value=explicit_period_value,
            terminal_value=terminal_value,
            terminal_value_present=terminal_value_present,
            enterprise_value=enterprise_value,
            equity_value=equity_value,
        )
        logger.debug(
            f"DCF breakdown: EPV={explicit_period_value}, TV={terminal_value}, "
            f"PV(TV)={terminal_value_present}, EV={enterprise_value}, equity={equity_value}"
        )

        return ValuationResult(
            intrinsic_value_per_share=intrinsic_value_per_share,
            currency=self._currency,
            remark=self.classify(intrinsic_value_per_share, validated.current_market_price),
            breakdown=breakdown,
        )

    @staticmethod
    def classify(intrinsic_value_per_share: Decimal, current_market_price: Decimal) -> Remark:
        """Compare intrinsic value with market price. Only an exact tie is fair value."""
        if intrinsic_value_per_share > current_market_price:
            return Remark.UNDERVALUED
        if intrinsic_value_per_share < current_market_price:
            return Remark.OVERVALUED
        return Remark.FAIRLY_VALUED

    def calculate(self, valuation_input: Optional[ValuationInput]) -> ValuationResult:
        """Validate then compute, failing fast on invalid input."""
        return self.compute_intrinsic_value(self.validate(valuation_input))
