"""
Valuation Domain Configuration

Configuration settings and constants for intrinsic value calculations.
"""

# Standard library imports
from decimal import Decimal
from typing import Dict, Optional

# Third-party imports
from pydantic import Field
from pydantic_settings import SettingsConfigDict

# App imports
from intrinsic_value.shared.config_helpers import BaseDomainConfig, create_domain_config
from intrinsic_value.shared.response_utils import RESPONSE_CODE_PREFIX


class ValuationConfig(BaseDomainConfig):
    """Configuration for the valuation domain."""

    model_config = SettingsConfigDict(
        env_prefix="VALUATION_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Reporting currency label; no conversion is performed
    currency: str = Field(default="USD")

    # Cash amounts in billions, share counts in millions
    unit_scale: Decimal = Field(default=Decimal("1000"))

    response_code_prefix: str = Field(default=RESPONSE_CODE_PREFIX)

    def validate_required_fields(self) -> Dict[str, bool]:
        """
        Validate that all required fields are present.

        Returns:
            Dictionary mapping field names to validation status
        """
        results = super().validate_required_fields()

        results["currency"] = bool(self.currency and self.currency.strip())
        results["unit_scale"] = self.unit_scale.is_finite() and self.unit_scale > 0

        return results


# Global configuration instance
_valuation_config: Optional[ValuationConfig] = None


def get_valuation_config() -> ValuationConfig:
    """Get the global valuation configuration."""
    global _valuation_config
    if _valuation_config is None:
        _valuation_config = create_domain_config(ValuationConfig)
    return _valuation_config


def reset_valuation_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment."""
    global _valuation_config
    _valuation_config = None


# Constants for valuation calculations
FORECAST_YEARS = 10

# Per-share values are reported to the cent
CURRENCY_PRECISION = Decimal("0.01")

# Working precision for intermediate decimal arithmetic
CALCULATION_PRECISION = 34

VALUATION_INPUT_FIELDS = (
    "fcf_last_year",
    "growth_rate",
    "discount_rate",
    "terminal_growth_rate",
    "shares_outstanding",
    "net_debt",
    "current_market_price",
)


__all__ = [
    "ValuationConfig",
    "get_valuation_config",
    "reset_valuation_config",
    "FORECAST_YEARS",
    "CURRENCY_PRECISION",
    "CALCULATION_PRECISION",
    "VALUATION_INPUT_FIELDS",
]
