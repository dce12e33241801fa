#!/usr/bin/env python3
"""
CMDY CONFIG SUITE
-----------------
Settings resolution: defaults, explicit files, environment, bad input.

Author: Cmdy Team
Date: 2026-10-19
"""

import pytest

from cmdy.core import config
from cmdy.core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings, load_settings
from cmdy.core.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keeps the user's real ~/.config and CMDY_CONFIG out of every test."""
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "default_config_path", lambda: tmp_path / "missing" / "config.yaml")
    return tmp_path


def test_defaults_when_no_file():
    settings = load_settings()

    assert settings == Settings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_explicit_file(tmp_path):
    path = tmp_path / "cmdy.yaml"
    path.write_text("base_url: http://localhost:8080/\ntimeout: 5\nuser_agent: cmdy-tests\n")

    settings = load_settings(str(path))

    assert settings.base_url == "http://localhost:8080"
    assert settings.timeout == 5.0
    assert settings.user_agent == "cmdy-tests"


def test_environment_variable(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("timeout: 12.5\n")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))

    assert load_settings().timeout == 12.5


def test_default_path_is_used_when_present(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("timeout: 7\n")
    monkeypatch.setattr(config, "default_config_path", lambda: path)

    assert load_settings().timeout == 7.0


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_settings(str(path)) == Settings()


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "extra.yaml"
    path.write_text("colour: always\ntimeout: 3\n")

    with caplog.at_level("WARNING", logger="cmdy.config"):
        settings = load_settings(str(path))

    assert settings.timeout == 3.0
    assert "colour" in caplog.text


@pytest.mark.parametrize("content", [
    "timeout: -1\n",
    "timeout: soon\n",
    "timeout: true\n",
    "base_url: ''\n",
    "user_agent: 42\n",
    "- just\n- a list\n",
    "base_url: [unclosed\n",
    "base_url: 'http://[::1'\n",
    "base_url: command-not-found.com\n",
])
def test_bad_files_raise_config_error(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_settings(str(path))


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(str(tmp_path / "nope.yaml"))


def test_overrides_skip_none():
    settings = Settings().with_overrides(timeout=None, base_url="http://x")

    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.base_url == "http://x"


if __name__ == "__main__":
    pytest.main([__file__])
