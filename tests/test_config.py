"""Test the configuration module."""

import pytest
from pydantic import ValidationError

from collection_helpers.config import get_settings


def test_random_seed_defaults_to_none(monkeypatch: pytest.MonkeyPatch) -> None:
    """COLLECTION_HELPERS_RANDOM_SEED should default to unseeded."""
    monkeypatch.delenv("COLLECTION_HELPERS_RANDOM_SEED", raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.random_seed is None


def test_random_seed_can_be_set_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """COLLECTION_HELPERS_RANDOM_SEED env var should be parsed as an int."""
    monkeypatch.setenv("COLLECTION_HELPERS_RANDOM_SEED", "42")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.random_seed == 42


def test_log_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    """COLLECTION_HELPERS_LOG_LEVEL should default to WARNING."""
    monkeypatch.delenv("COLLECTION_HELPERS_LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.log_level == "WARNING"


def test_log_level_can_be_overridden_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """COLLECTION_HELPERS_LOG_LEVEL env var should override the default."""
    monkeypatch.setenv("COLLECTION_HELPERS_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """COLLECTION_HELPERS_LOG_LEVEL must name a logging level."""
    monkeypatch.setenv("COLLECTION_HELPERS_LOG_LEVEL", "verbose")
    get_settings.cache_clear()

    with pytest.raises(ValidationError, match="log_level"):
        get_settings()

    get_settings.cache_clear()
