"""Configuration package."""

from accountant.config.settings import (
    AppSettings,
    EvaluatorSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "EvaluatorSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
