"""Defines the client settings."""

import functools
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import OmegaConf

# This is the host serving the v2 JSON API.
DEFAULT_API_ROOT = "https://github.com"

DEFAULT_PROFILE_ENDPOINT = "/api/v2/json/user/show"

DEFAULT_PROFILE_URL_BASE = "https://github.com/"

SETTINGS_FILE_NAME = "settings.yaml"


def get_path() -> Path:
    if "GHPROFILE_CONFIG_DIR" in os.environ:
        return Path(os.environ["GHPROFILE_CONFIG_DIR"]).expanduser().resolve()
    return Path("~/.ghprofile/").expanduser().resolve()


@dataclass
class GitHubSettings:
    api_root: str = field(default=DEFAULT_API_ROOT)
    profile_endpoint: str = field(default=DEFAULT_PROFILE_ENDPOINT)
    profile_url_base: str = field(default=DEFAULT_PROFILE_URL_BASE)
    auth_scheme: str = field(default="OAuth")
    timeout: float = field(default=30.0)


@dataclass
class Settings:
    github: GitHubSettings = field(default_factory=GitHubSettings)

    def save(self) -> None:
        (dir_path := get_path()).mkdir(parents=True, exist_ok=True)
        with open(dir_path / SETTINGS_FILE_NAME, "w") as f:
            OmegaConf.save(config=self, f=f)

    @staticmethod
    @functools.lru_cache
    def load() -> "Settings":
        config = OmegaConf.structured(Settings)
        if (settings_path := get_path() / SETTINGS_FILE_NAME).exists():
            try:
                with open(settings_path, "r") as f:
                    raw_settings = OmegaConf.load(f)
                    config = OmegaConf.merge(config, raw_settings)
            except Exception as e:
                warnings.warn(f"Failed to load settings: {e}")
        return config
