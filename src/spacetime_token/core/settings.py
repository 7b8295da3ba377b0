"""Application settings persistence (``<app dir>/config.toml``)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import tomlkit
from platformdirs import user_config_dir
from tomlkit.exceptions import TOMLKitError

from spacetime_token.core.config import AppSettings
from spacetime_token.core.constants import APP_DIR_NAME, APP_HOME_ENV_VAR, SETTINGS_FILENAME
from spacetime_token.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def get_app_home() -> Path:
    """Get the app config directory ($SPACETIME_TOKEN_HOME or the platform config dir).

    Returns:
        Path to the app config directory (not created)
    """
    app_home = os.environ.get(APP_HOME_ENV_VAR)
    if app_home:
        return Path(app_home).expanduser()
    return Path(user_config_dir(APP_DIR_NAME, appauthor=False))


def ensure_app_home(app_home: Path | None = None) -> Path:
    """Return the app config directory, creating it if needed.

    Raises:
        ConfigError: If the directory cannot be created
    """
    app_home = app_home or get_app_home()
    if not app_home.exists():
        try:
            app_home.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(
                "Failed to create app config directory", config_file=app_home, details=f"{app_home}: {e}"
            ) from e
        logger.info(f"Created application config directory at {app_home}")
    return app_home


def get_home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        ConfigError: If the home directory cannot be determined
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError("Failed to get home directory", details=str(e)) from e


class SettingsStore:
    """Loads and saves ``AppSettings`` as TOML inside the app config directory."""

    def __init__(self, app_home: Path | None = None):
        self._app_home = app_home

    @property
    def app_home(self) -> Path:
        return ensure_app_home(self._app_home)

    @property
    def path(self) -> Path:
        return self.app_home / SETTINGS_FILENAME

    def load(self) -> AppSettings:
        """Load settings, creating the file with defaults on first run.

        Raises:
            ConfigError: If the file cannot be read, parsed or created
        """
        path = self.path
        if not path.exists():
            logger.info(f"Configuration file not found at {path}. Creating with default settings.")
            settings = AppSettings()
            self.save(settings)
            return settings

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError("Failed to read app config file", config_file=path, details=f"{path}: {e}") from e

        try:
            data = tomlkit.parse(content).unwrap()
            settings = AppSettings.from_dict(data)
        except (TOMLKitError, ValueError) as e:
            raise ConfigError("Failed to parse app config file", config_file=path, details=f"{path}: {e}") from e

        logger.debug(f"Loaded settings from {path}")
        return settings

    def save(self, settings: AppSettings) -> Path:
        """Overwrite the settings file with ``settings``.

        Raises:
            ConfigError: If the file cannot be serialized or written
        """
        path = self.path
        try:
            content = tomlkit.dumps(settings.to_dict())
        except (TOMLKitError, TypeError, ValueError) as e:
            raise ConfigError("Failed to serialize app settings to TOML", config_file=path, details=str(e)) from e
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ConfigError("Failed to write app config", config_file=path, details=f"{path}: {e}") from e

        logger.info(f"Wrote settings to {path}")
        return path
