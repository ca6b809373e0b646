"""
Configuration management for the vowels package.

Loads configuration from environment variables and .env file.
Settings are read when the CLI starts, not at import.
"""

import logging
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class VowelsConfig(BaseSettings):
    """Configuration settings for the vowels package."""

    log_level: str = Field("WARNING", description="Level for diagnostics written to stderr")
    output_format: str = Field("text", description="Default output format of 'vowels list': text or json")

    model_config = {
        "env_prefix": "VOWELS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra fields from env
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v.lower() not in ["text", "json"]:
            raise ValueError(f"Invalid output format: {v}. Expected: text or json")
        return v.lower()
