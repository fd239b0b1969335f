"""Configuration via pydantic-settings — loaded from env vars / .env file."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """dictarith configuration."""

    ignore_case: bool = Field(default=False, description="Compile CLI /patterns/ case-insensitively")
    output: Literal["json", "table"] = Field(default="json", description="Default CLI output format")
    log_level: LogLevel = Field(default="WARNING", description="Logging level used by the CLI")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("output", mode="before")
    @classmethod
    def lower_output(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    class Config:
        env_prefix = "DICTARITH_"
        env_file = ".env"


settings = Settings()
