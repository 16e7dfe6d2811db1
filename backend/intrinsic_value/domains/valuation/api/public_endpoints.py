"""
Public Valuation API Endpoints

Client-facing endpoints for intrinsic value calculation.
"""

import logging

from fastapi import APIRouter, Depends

from intrinsic_value.shared.exceptions import DomainException, handle_domain_exception
from intrinsic_value.shared.response_models import create_success_response
from intrinsic_value.shared.response_utils import response_code
from ..schemas import IntrinsicValueRequest, IntrinsicValueResponse
from ..services.transformer import transform_to_data, transform_to_input
from ..services.valuation import get_valuation_service, ValuationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/calculate", response_model=IntrinsicValueResponse)
def calculate_intrinsic_value(
    request: IntrinsicValueRequest,
    valuation_service: ValuationService = Depends(get_valuation_service)
):
    """
    Calculates the intrinsic value per share with a two-stage DCF model and
    classifies it against the current market price.
    """
    try:
        result = valuation_service.calculate(transform_to_input(request))
    except DomainException as e:
        raise handle_domain_exception(e)
    except Exception as e:
        logger.exception(f"Unexpected error during intrinsic value calculation: {e}")
        raise handle_domain_exception(e)

    return create_success_response(
        data=transform_to_data(result),
        internal_code=response_code("10", valuation_service.config.response_code_prefix),
        response_class=IntrinsicValueResponse,
    )
