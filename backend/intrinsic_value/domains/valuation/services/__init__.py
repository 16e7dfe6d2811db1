"""
Valuation Services

Core services for intrinsic value calculation: the DCF engine, the
wire/engine transformer and the configured valuation service.
"""

from .engine import ValuationEngine
from .transformer import transform_to_data, transform_to_input
from .valuation import ValuationService, get_valuation_service

__all__ = [
    # Calculation engine
    "ValuationEngine",

    # Wire conversion
    "transform_to_input",
    "transform_to_data",

    # Configured service
    "ValuationService",
    "get_valuation_service",
]
