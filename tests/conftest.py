"""Fixtures: isolated report config and valid ticket fields."""

import pytest

import tickets.settings as settings_module


@pytest.fixture(autouse=True)
def isolate_report_settings(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point config at tmp_path, clear TICKETS_* env and the cached settings."""
    monkeypatch.setattr(settings_module, "CONFIG_PATH", tmp_path / "config.toml")
    monkeypatch.delenv("TICKETS_COLOR", raising=False)
    monkeypatch.delenv("TICKETS_SHOW_CAUSES", raising=False)
    monkeypatch.chdir(tmp_path)
    settings_module._load_toml.cache_clear()
    settings_module.get_report_settings.cache_clear()
    yield
    settings_module._load_toml.cache_clear()
    settings_module.get_report_settings.cache_clear()


@pytest.fixture
def valid_title() -> str:
    return "A title"


@pytest.fixture
def valid_description() -> str:
    return "A description"
