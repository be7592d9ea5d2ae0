"""
Runtime configuration for the API and CLI.

Values come from environment variables or a local .env file. The analysis
core does not read settings; its constants live next to the code.
"""

import logging
from typing import Annotated, List
from pydantic_settings import BaseSettings, NoDecode
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    debug: bool = Field(default=False, description="Expose /docs and /redoc")
    log_level: str = Field(default="INFO", description="Root logging level")

    # NoDecode: the env value is a plain "a,b,c" string, split below
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Browser origins allowed to call the API"
    )

    # Forecasts (Open-Meteo, no API key)
    weather_api_url: str = Field(default="https://api.open-meteo.com/v1/forecast")
    weather_timeout_seconds: float = Field(default=10.0, gt=0)

    # GPX upload limit
    max_upload_mb: int = Field(default=20, ge=1)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('cors_origins', mode='before')
    @classmethod
    def split_origins(cls, v):
        """Accept 'a,b,c' from the environment."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
