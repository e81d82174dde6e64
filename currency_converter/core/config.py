from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, HOST, PORT).
    """

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "1.0.0"

    # Server binding
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
