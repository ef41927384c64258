"""Configuration loader for the Amazon product adapter.

Values come from environment variables. An optional `.env` file next to
this module is loaded first and never overrides variables already set.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))

LOG_FORMATS = ("text", "json")


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with fallback to default"""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_env_choice(key: str, choices: tuple, default: str) -> str:
    """Get environment variable restricted to `choices`, falling back to default"""
    value = (get_env_var(key, default) or default).lower()
    if value not in choices:
        return default
    return value


@dataclass
class AdapterConfig:
    """Configuration for the Amazon product adapter."""

    # Normalized model
    AMAZON_SOURCE_NAME: str = field(
        default_factory=lambda: get_env_var("AMAZON_SOURCE_NAME", "amazon")
    )
    AMAZON_PRIMARY_IMAGE_VARIANT: str = field(
        default_factory=lambda: get_env_var("AMAZON_PRIMARY_IMAGE_VARIANT", "MAIN")
    )

    # Logging
    LOG_LEVEL: str = field(
        default_factory=lambda: (get_env_var("LOG_LEVEL", "INFO") or "INFO").upper()
    )
    LOG_FORMAT: str = field(
        default_factory=lambda: get_env_choice("LOG_FORMAT", LOG_FORMATS, "text")
    )


# Create config instance
config = AdapterConfig()
