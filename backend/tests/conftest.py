from dataclasses import replace
from decimal import Decimal

import pytest

from intrinsic_value.domains.valuation.config import reset_valuation_config
from intrinsic_value.domains.valuation.models import ValuationInput
from intrinsic_value.domains.valuation.services.engine import ValuationEngine


@pytest.fixture(autouse=True)
def clean_valuation_config(monkeypatch):
    """Every test starts from default valuation settings."""
    for name in ("VALUATION_CURRENCY", "VALUATION_UNIT_SCALE", "VALUATION_RESPONSE_CODE_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    reset_valuation_config()
    yield
    reset_valuation_config()


@pytest.fixture
def engine():
    return ValuationEngine()


@pytest.fixture
def base_input():
    return ValuationInput(
        fcf_last_year=Decimal("1.1"),
        growth_rate=Decimal("0.15"),
        discount_rate=Decimal("0.10"),
        terminal_growth_rate=Decimal("0.03"),
        shares_outstanding=Decimal("122"),
        net_debt=Decimal("0.5"),
        current_market_price=Decimal("291.06"),
    )


@pytest.fixture
def make_input(base_input):
    """Base case with selected fields overridden."""
    def _make(**overrides):
        return replace(base_input, **overrides)
    return _make


@pytest.fixture
def base_request_json():
    return {
        "fcfLastYear": 1.1,
        "growthRate": 0.15,
        "discountRate": 0.10,
        "terminalGrowthRate": 0.03,
        "sharesOutstanding": 122,
        "netDebt": 0.5,
        "currentMarketPrice": 291.06,
    }
