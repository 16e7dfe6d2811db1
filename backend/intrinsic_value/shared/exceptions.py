"""
Shared Exception Classes

Domain-specific exception classes for consistent error handling across all domains.
Provides structured error reporting with appropriate HTTP status codes.
"""

# Standard library imports
from typing import Optional, Dict, Any, List

# Third-party imports
from fastapi import HTTPException


class DomainException(Exception):
    """
    Base exception class for all domain-specific errors.

    Provides common functionality for error reporting and logging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ValuationInputError(DomainException):
    """Base exception for invalid valuation input. Never retriable."""
    pass


class NullInputError(ValuationInputError):
    """Raised when the valuation input record itself is absent."""

    def __init__(self):
        super().__init__(
            message="Input DTO cannot be null.",
            error_code="NULL_INPUT"
        )


class MissingFieldError(ValuationInputError):
    """Raised when one or more of the required input fields is unset."""

    def __init__(self, missing_fields: List[str]):
        super().__init__(
            message="One or more input parameters are null.",
            error_code="MISSING_FIELD",
            details={"missing_fields": missing_fields}
        )


class InvalidFieldError(ValuationInputError):
    """Raised when a field is present but is not a finite decimal."""

    def __init__(self, field: str, value: Any):
        super().__init__(
            message=f"Input parameter '{field}' must be a finite decimal number.",
            error_code="INVALID_FIELD",
            details={"field": field, "value": str(value)}
        )


class NonPositiveSharesError(ValuationInputError):
    """Raised when shares outstanding is zero or negative."""

    def __init__(self, shares_outstanding: Any):
        super().__init__(
            message="Shares outstanding must be greater than zero.",
            error_code="NON_POSITIVE_SHARES",
            details={"shares_outstanding": str(shares_outstanding)}
        )


class DegenerateRateError(ValuationInputError):
    """Raised when discount rate equals terminal growth rate (terminal value undefined)."""

    def __init__(self, rate: Any):
        super().__init__(
            message="Discount rate and terminal growth rate cannot be equal.",
            error_code="DEGENERATE_RATE",
            details={"discount_rate": str(rate), "terminal_growth_rate": str(rate)}
        )


class ConfigurationException(DomainException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_item: str, reason: str):
        message = f"Configuration error for {config_item}: {reason}"
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"config_item": config_item, "reason": reason}
        )


def domain_exception_to_http_exception(exception: DomainException) -> HTTPException:
    """
    Convert domain exceptions to FastAPI HTTPException with appropriate status codes.

    Args:
        exception: Domain-specific exception

    Returns:
        HTTPException with appropriate status code and detail
    """
    if isinstance(exception, ValuationInputError):
        # Caller input errors
        status_code = 400
    else:
        status_code = 500

    detail = {
        "error": exception.message,
        "error_code": exception.error_code,
        "details": exception.details
    }

    return HTTPException(status_code=status_code, detail=detail)


def handle_domain_exception(exception: Exception) -> HTTPException:
    """
    Handle domain exceptions and convert them to appropriate HTTP responses.

    Args:
        exception: Any exception that occurred

    Returns:
        HTTPException with appropriate status code and detail
    """
    if isinstance(exception, DomainException):
        return domain_exception_to_http_exception(exception)
    else:
        # Handle generic exceptions
        return HTTPException(
            status_code=500,
            detail={
                "error": "Internal server error",
                "error_code": "INTERNAL_ERROR",
                "details": {"message": str(exception)}
            }
        )
