"""
Valuation Service

This service performs intrinsic value calculations with the two-stage DCF
engine, configured from the valuation domain settings.
"""
import logging
from typing import Optional

from intrinsic_value.domains.valuation.config import ValuationConfig, get_valuation_config
from intrinsic_value.domains.valuation.models import ValuationInput, ValuationResult
from intrinsic_value.domains.valuation.services.engine import ValuationEngine
from intrinsic_value.shared.exceptions import ValuationInputError

logger = logging.getLogger(__name__)


class ValuationService:
    """A service for performing intrinsic value calculations."""

    def __init__(self, config: Optional[ValuationConfig] = None):
        self.config = config or get_valuation_config()
        self.engine = ValuationEngine(
            currency=self.config.currency,
            unit_scale=self.config.unit_scale,
        )

    def calculate(self, valuation_input: Optional[ValuationInput]) -> ValuationResult:
        """
        Calculates the intrinsic value per share and classifies it against
        the market price.

        Raises:
            ValuationInputError: If the input fails validation
        """
        try:
            result = self.engine.calculate(valuation_input)
        except ValuationInputError as e:
            logger.warning(f"Rejected valuation input ({e.error_code}): {e.message}")
            raise

        logger.info(
            f"Intrinsic value {result.intrinsic_value_per_share} {result.currency} "
            f"vs market {valuation_input.current_market_price}: {result.remark.value}"
        )
        return result


def get_valuation_service() -> ValuationService:
    """Provides an instance of the ValuationService."""
    return ValuationService()
