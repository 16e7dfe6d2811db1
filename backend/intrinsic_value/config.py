from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    app_name: str = "Intrinsic Value API"
    version: str = "0.1.0"
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    model_config = SettingsConfigDict(
        # Use absolute path to root .env file
        env_file=str(Path(__file__).resolve().parents[2] / '.env'),
        env_file_encoding='utf-8',
        extra='ignore',
    )


def get_settings() -> Settings:
    """Get fresh settings instance."""
    return Settings()


settings = get_settings()
