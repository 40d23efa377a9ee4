"""
Core configuration module for Genesis.

This module manages application settings using Pydantic Settings,
providing type-safe configuration with environment variable support.
"""

from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = "Genesis Metaheuristic Optimization"
    app_version: str = "1.0.0"
    environment: str = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Logfire settings
    logfire_token: str = Field(default="")
    logfire_project_name: str = Field(default="genesis-optimization")
    logfire_service_name: str = Field(default="genesis")
    logfire_environment: str = Field(default="development")
    logfire_console: bool = Field(default=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
