"""
Shared Domain Utilities

Common utilities and helpers used across domains.
Provides configuration helpers, response envelopes and exception handling.
"""

from .exceptions import (
    DomainException, ValuationInputError,
    NullInputError, MissingFieldError, InvalidFieldError,
    NonPositiveSharesError, DegenerateRateError, ConfigurationException,
    handle_domain_exception, domain_exception_to_http_exception
)
from .response_utils import (
    RESPONSE_CODE_PREFIX, response_code, get_response_message
)
from .response_models import (
    APIResponse, HealthCheckResponse, StatusEnum, create_success_response
)
from .config_helpers import (
    BaseDomainConfig, create_domain_config
)

__all__ = [
    # Exception classes and handlers
    "DomainException", "ValuationInputError",
    "NullInputError", "MissingFieldError", "InvalidFieldError",
    "NonPositiveSharesError", "DegenerateRateError", "ConfigurationException",
    "handle_domain_exception", "domain_exception_to_http_exception",

    # Response codes and messages
    "RESPONSE_CODE_PREFIX", "response_code", "get_response_message",

    # Response models and helpers
    "APIResponse", "HealthCheckResponse", "StatusEnum", "create_success_response",

    # Configuration helpers
    "BaseDomainConfig",
    "create_domain_config",
]
