"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Business rules that used to be hard-coded (delivery window, rating bounds,
order validation strictness) live here so they can be tuned per environment.

Usage:
    from delivery.core.config import get_settings

    settings = get_settings()
    if settings.strict_order_validation:
        # Reject out-of-window delivery hours
        ...

Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local work and test runs
        PRODUCTION: Live deployment
        STAGING: Pre-production checks
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging

        # Delivery window
        delivery_window_start: First hour an order can be delivered
        delivery_window_end: Last hour an order can be delivered

        # Ratings
        min_rating: Lowest accepted rating (inclusive)
        max_rating: Highest accepted rating (inclusive)

        # Orders
        strict_order_validation: Validate hour range, distance and line
            lengths when an order is placed
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Food Delivery Catalog",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # ==========================================================================
    # DELIVERY WINDOW
    # ==========================================================================

    delivery_window_start: int = Field(
        default=8,
        ge=0,
        le=23,
        description="First deliverable hour of the day"
    )
    delivery_window_end: int = Field(
        default=23,
        ge=0,
        le=23,
        description="Last deliverable hour of the day"
    )

    # ==========================================================================
    # RATINGS
    # ==========================================================================

    min_rating: int = Field(
        default=0,
        description="Lowest accepted restaurant rating"
    )
    max_rating: int = Field(
        default=5,
        description="Highest accepted restaurant rating"
    )

    # ==========================================================================
    # ORDERS
    # ==========================================================================

    strict_order_validation: bool = Field(
        default=False,
        description="Reject orders outside the delivery window or with mismatched lines"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Bounds must not be inverted."""
        if self.delivery_window_start > self.delivery_window_end:
            raise ValueError(
                "delivery_window_start must not be after delivery_window_end"
            )
        if self.min_rating > self.max_rating:
            raise ValueError("min_rating must not exceed max_rating")
        return self

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env_mode == EnvironmentMode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env_mode == EnvironmentMode.PRODUCTION

    @property
    def is_staging(self) -> bool:
        """Check if running in staging mode."""
        return self.env_mode == EnvironmentMode.STAGING

    @property
    def delivery_hours(self) -> range:
        """Deliverable hours as a range (end inclusive)."""
        return range(self.delivery_window_start, self.delivery_window_end + 1)

    def is_valid_rating(self, rating: int) -> bool:
        """Check a rating against both bounds."""
        return self.min_rating <= rating <= self.max_rating


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and shared for the lifetime of the process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.delivery_window_start)
        8
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    # Set level based on debug mode
    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    return logging.getLogger("delivery")

