"""Pytest configuration for test isolation.

Settings are cached process-wide by get_settings(). Tests that change
EVALUATOR_* / LOG_* environment variables must not leak those values
into other tests, so the cache is cleared around every test and the
relevant variables are removed from the environment.
"""

import pytest

from accountant.config import get_settings


_ENV_VARS = (
    "EVALUATOR_DIVISION_SCALE",
    "EVALUATOR_ROUNDING",
    "APP_ENVIRONMENT",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
