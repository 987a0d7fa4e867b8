"""Tests for loading and saving settings."""

from pathlib import Path

import pytest

from ghprofile.conf import DEFAULT_API_ROOT, SETTINGS_FILE_NAME, Settings, get_path


def test_defaults_without_settings_file(isolated_settings: Path) -> None:
    settings = Settings.load()
    assert get_path() == isolated_settings.resolve()
    assert settings.github.api_root == DEFAULT_API_ROOT
    assert settings.github.profile_endpoint == "/api/v2/json/user/show"
    assert settings.github.profile_url_base == "https://github.com/"
    assert settings.github.auth_scheme == "OAuth"


def test_save_and_load(isolated_settings: Path) -> None:
    settings = Settings()
    settings.github.timeout = 5.0
    settings.save()
    assert (isolated_settings / SETTINGS_FILE_NAME).exists()

    Settings.load.cache_clear()
    loaded = Settings.load()
    assert loaded.github.timeout == 5.0
    assert loaded.github.api_root == DEFAULT_API_ROOT


def test_invalid_settings_fall_back_to_defaults(isolated_settings: Path) -> None:
    (isolated_settings / SETTINGS_FILE_NAME).write_text("github:\n  timeout: soon\n")
    with pytest.warns(UserWarning, match="Failed to load settings"):
        settings = Settings.load()
    assert settings.github.timeout == 30.0
