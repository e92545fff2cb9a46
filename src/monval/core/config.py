#!/usr/bin/env python3
"""
Configuration Management for monval

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production); the settings
that matter to the codec are the overflow policy and the default currency
label used by the command line.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class OverflowPolicy(Enum):
    """
    What to do when a conversion leaves the signed 64-bit range.

    RAISE fails fast with an error. WRAP reproduces native two's-complement
    wraparound, as fixed-width integer arithmetic would.
    """

    RAISE = "raise"
    WRAP = "wrap"


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Main configuration class for monval.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Codec settings
    overflow: OverflowPolicy = OverflowPolicy.RAISE
    currency_code: str | None = None

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MONVAL_ENV", "development"))

        try:
            overflow = OverflowPolicy(os.getenv("MONVAL_OVERFLOW", "raise").strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid MONVAL_OVERFLOW value: {e}") from e

        return cls(
            environment=env,
            overflow=overflow,
            currency_code=os.getenv("MONVAL_CURRENCY_CODE") or None,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level}")

        if self.currency_code is not None and not self.currency_code.strip():
            errors.append("MONVAL_CURRENCY_CODE must not be blank")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        if self.debug:
            logging.getLogger("monval").setLevel(logging.DEBUG)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_overflow_policy() -> OverflowPolicy:
    """Get the configured overflow policy."""
    return get_config().overflow


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
