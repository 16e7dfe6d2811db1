"""
Shared Response Models

Standardized response models and error handling patterns used across all domains.
Ensures consistent API response formats throughout the application.
"""

# Standard library imports
from datetime import datetime
from typing import Optional, Any, Dict, List, Type
from enum import Enum

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# App imports
from intrinsic_value.shared.response_utils import get_response_message


class StatusEnum(str, Enum):
    """Standard status values for API responses."""
    SUCCESS = "success"
    ERROR = "error"


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class APIResponse(CamelModel):
    """
    Standard API response wrapper.

    Provides consistent structure for all API responses across domains.
    """
    status: StatusEnum = Field(..., description="Response status")
    http_status: int = Field(200, description="HTTP status code of the response")
    message: Optional[str] = Field(None, description="Human-readable message")
    internal_code: Optional[str] = Field(None, description="Application-specific response code")
    data: Optional[Any] = Field(None, description="Response payload")
    errors: Optional[List[str]] = Field(None, description="List of error messages")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")
    request_id: Optional[str] = Field(None, description="Unique request identifier")


class HealthCheckResponse(CamelModel):
    """
    Standard health check response format.

    Used for monitoring and service discovery.
    """
    status: StatusEnum = Field(..., description="Service health status")
    service_name: str = Field(..., description="Name of the service")
    version: str = Field(..., description="Service version")
    dependencies: Optional[Dict[str, str]] = Field(None, description="Status of service dependencies")
    timestamp: datetime = Field(default_factory=datetime.now, description="Health check timestamp")


def create_success_response(
    data: Any = None,
    internal_code: Optional[str] = None,
    http_status: int = 200,
    response_class: Type[APIResponse] = APIResponse,
    **kwargs
) -> APIResponse:
    """
    Helper function to create standardized success responses.

    Args:
        data: Response payload
        internal_code: Application-specific response code, used to look up the message
        http_status: HTTP status code reported in the envelope
        response_class: Envelope model to build, for endpoints with a typed payload
        **kwargs: Additional fields for the response

    Returns:
        Standardized success response
    """
    return response_class(
        status=StatusEnum.SUCCESS,
        http_status=http_status,
        message=get_response_message(internal_code),
        internal_code=internal_code,
        data=data,
        **kwargs
    )
