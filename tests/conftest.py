"""Pytest configuration and fixtures for spacetime-token tests"""
import logging
from pathlib import Path

import pytest

from spacetime_token.cli.commands import TokenContext
from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.config import AppSettings
from spacetime_token.core.settings import SettingsStore


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Disable colors so assertions can match plain text"""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    ConsoleColors.configure(no_color=True)
    yield
    ConsoleColors.configure(no_color=True)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def app_home(tmp_path, monkeypatch) -> Path:
    """Point the app config directory at a temp dir"""
    path = tmp_path / "app"
    monkeypatch.setenv("SPACETIME_TOKEN_HOME", str(path))
    return path


@pytest.fixture
def home_dir(tmp_path, monkeypatch) -> Path:
    """Point the user's home directory at a temp dir"""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    monkeypatch.setenv("USERPROFILE", str(path))
    return path


@pytest.fixture
def cli_config_path(home_dir) -> Path:
    """Location of the spacetime CLI config under the temp home"""
    return home_dir / ".config" / "spacetime" / "cli.toml"


@pytest.fixture
def write_cli_config(cli_config_path):
    """Write raw TOML text to the spacetime CLI config"""

    def _write(content: str) -> Path:
        cli_config_path.parent.mkdir(parents=True, exist_ok=True)
        cli_config_path.write_text(content, encoding="utf-8")
        return cli_config_path

    return _write


@pytest.fixture
def ctx(app_home, home_dir) -> TokenContext:
    """A command context with default settings against temp directories"""
    return TokenContext.build(AppSettings(), SettingsStore(app_home), home=home_dir)


@pytest.fixture
def profiles_path(app_home) -> Path:
    return app_home / "profiles.toml"
