# tests/conftest.py
import pytest

from proplogic.config import CONFIG_ENV_VAR, MAX_VARIABLES_ENV_VAR, EngineConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(MAX_VARIABLES_ENV_VAR, raising=False)


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def pq():
    return ["p", "q"]
