import importlib

import pytest

from ezgg.config import Settings, settings

# the package re-exports the instance under the module name
settings_module = importlib.import_module("ezgg.config.settings")


def test_validate_requires_api_key(monkeypatch):
    monkeypatch.setattr(Settings, "RIOT_API_KEY", "")
    with pytest.raises(ValueError):
        settings.validate()
    monkeypatch.setattr(Settings, "RIOT_API_KEY", "RGAPI-x")
    settings.validate()


def test_numeric_env_falls_back_on_junk(monkeypatch):
    monkeypatch.setenv("MATCH_HISTORY_COUNT", "lots")
    assert settings_module._int_env("MATCH_HISTORY_COUNT", 40) == 40
    monkeypatch.setenv("DEFAULT_RETRY_AFTER", "2.5")
    assert settings_module._float_env("DEFAULT_RETRY_AFTER", 1.0) == 2.5
