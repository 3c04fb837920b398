"""Configuration management for the validation engine.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Engine configuration loaded from environment variables and .env file.
    
    All configuration values are automatically loaded from:
    1. `.env` file in the project root (if present)
    2. Environment variables (as fallback)
    
    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        strict_params: Reject unknown validator parameters with
            UnknownPropertyError (True) or log and ignore them (False)
        validator_aliases: Extra alias -> dotted class path entries merged
            over the built-in alias table. Read from VALIDATOR_ALIASES as
            a JSON object.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    
    strict_params: bool = Field(
        default=True,
        description="Fail on validator parameters that match no field or state",
    )
    
    validator_aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Additional validator aliases mapped to dotted class paths",
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.
        
        Args:
            value: Log level string to validate
            
        Returns:
            Uppercase log level string
            
        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value
    
    @field_validator("validator_aliases")
    @classmethod
    def validate_validator_aliases(cls, value: dict[str, str]) -> dict[str, str]:
        """Reject empty alias names or targets."""
        for alias, target in value.items():
            if not alias.strip() or not target.strip():
                raise ValueError(
                    f"validator alias entries must be non-empty, got {alias!r}: {target!r}"
                )
        return {alias.strip(): target.strip() for alias, target in value.items()}


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.
    
    Loads configuration on first call and returns the same instance on
    subsequent calls (singleton pattern).
    
    Returns:
        Config instance with loaded configuration values
    """
    logger = logging.getLogger(__name__)
    
    global _config
    if _config is None:
        _config = Config()
        logger.debug(
            f"Configuration loaded: "
            f"LOG_LEVEL={_config.log_level}, "
            f"STRICT_PARAMS={_config.strict_params}, "
            f"VALIDATOR_ALIASES={sorted(_config.validator_aliases)}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.
    
    Useful for testing or when configuration changes at runtime.
    
    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
