from __future__ import annotations

import pytest

from matchbrowser import config
from matchbrowser.config import APISettings


@pytest.fixture(autouse=True)
def _no_env_file(monkeypatch):
    monkeypatch.setattr(config, "_ENV_LOADED", True)
    for name in (
        "MATCHBROWSER_API_URL",
        "MATCHBROWSER_API_TOKEN",
        "MATCHBROWSER_TIMEOUT",
        "MATCHBROWSER_MAX_RETRIES",
        "MATCHBROWSER_CACHE_DIR",
        "MATCHBROWSER_REFERENCE_TTL",
        "MATCHBROWSER_PER_PAGE",
    ):
        # setenv first so the undo also removes values loaded from .env files.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_from_env_defaults():
    settings = APISettings.from_env()
    assert settings.base_url == "http://127.0.0.1:3000"
    assert settings.api_token is None
    assert settings.timeout == 30
    assert settings.max_retries == 0
    assert settings.cache_dir == ".cache"
    assert settings.reference_ttl == 3600
    assert settings.default_per_page == 10


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("MATCHBROWSER_API_URL", "https://matches.test/api")
    monkeypatch.setenv("MATCHBROWSER_API_TOKEN", "token")
    monkeypatch.setenv("MATCHBROWSER_TIMEOUT", "5")
    monkeypatch.setenv("MATCHBROWSER_PER_PAGE", "25")
    settings = APISettings.from_env()
    assert settings.base_url == "https://matches.test/api"
    assert settings.api_token == "token"
    assert settings.timeout == 5
    assert settings.default_per_page == 25


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("MATCHBROWSER_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="MATCHBROWSER_TIMEOUT"):
        APISettings.from_env()


def test_env_file_is_loaded_without_overriding(monkeypatch, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text(
        "# comment\nMATCHBROWSER_API_URL='https://from-file.test'\nMATCHBROWSER_TIMEOUT=7\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "_ENV_LOADED", False)
    monkeypatch.setenv("MATCHBROWSER_ENV_FILE", str(env_file))
    monkeypatch.setenv("MATCHBROWSER_TIMEOUT", "9")
    monkeypatch.chdir(tmp_path)

    settings = APISettings.from_env()
    assert settings.base_url == "https://from-file.test"
    assert settings.timeout == 9


def test_undecodable_env_file_is_skipped(monkeypatch, tmp_path):
    env_file = tmp_path / "broken.env"
    env_file.write_bytes(b"MATCHBROWSER_TIMEOUT=\xff\xfe\n")
    monkeypatch.setattr(config, "_ENV_LOADED", False)
    monkeypatch.setenv("MATCHBROWSER_ENV_FILE", str(env_file))
    monkeypatch.chdir(tmp_path)

    assert APISettings.from_env().timeout == 30
