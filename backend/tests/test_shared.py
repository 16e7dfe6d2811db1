"""Tests for shared exceptions, response envelopes and message lookup."""
from decimal import Decimal

from intrinsic_value.domains.valuation.models import Remark, ValuationResult
from intrinsic_value.domains.valuation.schemas import IntrinsicValueRequest
from intrinsic_value.domains.valuation.services.transformer import transform_to_data, transform_to_input
from intrinsic_value.shared.exceptions import (
    ConfigurationException, DegenerateRateError, MissingFieldError,
    domain_exception_to_http_exception, handle_domain_exception
)
from intrinsic_value.shared.response_models import create_success_response
from intrinsic_value.shared.response_utils import get_response_message, response_code


def test_input_errors_map_to_bad_request():
    http_exception = domain_exception_to_http_exception(MissingFieldError(["net_debt"]))

    assert http_exception.status_code == 400
    assert http_exception.detail == {
        "error": "One or more input parameters are null.",
        "error_code": "MISSING_FIELD",
        "details": {"missing_fields": ["net_debt"]},
    }


def test_other_domain_errors_map_to_server_error():
    http_exception = handle_domain_exception(ConfigurationException("currency", "empty"))

    assert http_exception.status_code == 500
    assert http_exception.detail["error_code"] == "CONFIGURATION_ERROR"


def test_unexpected_errors_map_to_internal_error():
    http_exception = handle_domain_exception(RuntimeError("boom"))

    assert http_exception.status_code == 500
    assert http_exception.detail["error_code"] == "INTERNAL_ERROR"
    assert http_exception.detail["details"] == {"message": "boom"}


def test_degenerate_rate_details():
    error = DegenerateRateError(Decimal("0.03"))

    assert error.details == {"discount_rate": "0.03", "terminal_growth_rate": "0.03"}


def test_response_message_lookup():
    assert response_code("10") == "VALUATION-10"
    assert get_response_message("VALUATION-10") == "Intrinsic value calculated successfully"
    assert get_response_message("OTHER-10") == "Intrinsic value calculated successfully"
    assert get_response_message("VALUATION-99") == "Success"
    assert get_response_message(None) == "Success"


def test_success_response_serialises_camel_case():
    response = create_success_response(data={"value": 1}, internal_code="VALUATION-10")
    body = response.model_dump(mode="json", by_alias=True)

    assert body["status"] == "success"
    assert body["httpStatus"] == 200
    assert body["internalCode"] == "VALUATION-10"
    assert body["message"] == "Intrinsic value calculated successfully"
    assert body["data"] == {"value": 1}


def test_transform_request_to_input():
    request = IntrinsicValueRequest.model_validate({
        "fcfLastYear": "1.1",
        "growthRate": "0.15",
        "discountRate": "0.10",
        "terminalGrowthRate": "0.03",
        "sharesOutstanding": "122",
        "netDebt": "-0.5",
        "currentMarketPrice": "291.06",
    })

    valuation_input = transform_to_input(request)

    assert valuation_input.fcf_last_year == Decimal("1.1")
    assert valuation_input.net_debt == Decimal("-0.5")
    assert valuation_input.current_market_price == Decimal("291.06")


def test_transform_result_to_data():
    result = ValuationResult(
        intrinsic_value_per_share=Decimal("318.91"),
        currency="USD",
        remark=Remark.FAIRLY_VALUED,
    )

    data = transform_to_data(result).model_dump(mode="json", by_alias=True)

    assert data == {"intrinsicValue": "318.91", "currency": "USD", "remarks": "FairlyValued"}
