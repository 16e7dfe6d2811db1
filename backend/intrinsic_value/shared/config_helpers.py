"""
Shared Configuration Helpers

Common configuration utilities used across domains.
"""

# Standard library imports
from typing import Dict, Type, TypeVar

# Third-party imports
from pydantic_settings import BaseSettings, SettingsConfigDict

# App imports
from intrinsic_value.shared.exceptions import ConfigurationException

# Type variable for configuration classes
T = TypeVar('T', bound='BaseDomainConfig')


class BaseDomainConfig(BaseSettings):
    """
    Base configuration class for all domains.

    Provides common configuration patterns and environment variable handling.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_required_fields(self) -> Dict[str, bool]:
        """
        Validate that all required fields are present.

        Returns:
            Dictionary mapping field names to validation status
        """
        return {}


def create_domain_config(config_class: Type[T], **overrides) -> T:
    """
    Create a domain configuration instance with validation.

    Args:
        config_class: Domain configuration class
        **overrides: Explicit field values that take precedence over the environment

    Returns:
        Configured domain instance

    Raises:
        ConfigurationException: If configuration validation fails
    """
    config = config_class(**overrides)

    # Validate required fields
    validation_results = config.validate_required_fields()
    invalid_fields = [field for field, valid in validation_results.items() if not valid]

    if invalid_fields:
        raise ConfigurationException(
            config_class.__name__,
            f"invalid or missing fields: {', '.join(invalid_fields)}"
        )

    return config
