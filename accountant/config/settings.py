"""
Configuration Management for Personal Accountant

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The evaluator itself has no environment dependency; it only reads
the values below, and every value has a safe default.
"""

import decimal
from functools import cached_property, lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Rounding modes understood by the decimal module, by name
ROUNDING_MODES = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})


class EvaluatorSettings(BaseSettings):
    """Amount expression evaluator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EVALUATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    division_scale: int = Field(
        default=10,
        ge=0,
        le=28,
        description="Fractional digits kept after a division"
    )
    rounding: str = Field(
        default=decimal.ROUND_HALF_UP,
        description="decimal rounding mode applied to division results"
    )

    @field_validator('rounding')
    @classmethod
    def validate_rounding(cls, v: str) -> str:
        """Accept any decimal rounding constant name, case-insensitively."""
        normalized = v.strip().upper()
        if normalized not in ROUNDING_MODES:
            raise ValueError(
                f"Unknown rounding mode {v!r}. "
                f"Expected one of: {', '.join(sorted(ROUNDING_MODES))}"
            )
        return normalized


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (False = human-readable console output)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        normalized = v.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {v!r}")
        return normalized


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @cached_property
    def evaluator(self) -> EvaluatorSettings:
        return EvaluatorSettings()

    @cached_property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries describing any failure.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.evaluator
        results["evaluator"] = True
    except ValueError as e:
        results["evaluator"] = False
        results["evaluator_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except ValueError as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
