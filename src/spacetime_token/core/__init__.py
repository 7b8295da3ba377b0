"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the application:
- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
- Console colors and logging setup
- Application settings persistence
"""

from spacetime_token.core.version import __version__

from spacetime_token.core.exceptions import (
    SpacetimeTokenError,
    ConfigError,
    ProfileStoreError,
    ProfileStoreCorruptError,
    ProfileStoreIOError,
    ProfileExistsError,
    ProfileNotFoundError,
    NoProfilesError,
    InvalidProfileNameError,
    BridgeError,
    CliConfigNotFoundError,
    CliConfigParseError,
    CliConfigIOError,
    TokenTypeError,
    NotLoggedInError,
    ExternalCommandError,
    SelectionCancelledError,
)

from spacetime_token.core.config import AppSettings, LogConfig

from spacetime_token.core.colors import ConsoleColors

from spacetime_token.core.logging import JSONFormatter, SensitiveDataFilter, setup_logging

from spacetime_token.core.settings import SettingsStore, get_app_home

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "SpacetimeTokenError",
    "ConfigError",
    "ProfileStoreError",
    "ProfileStoreCorruptError",
    "ProfileStoreIOError",
    "ProfileExistsError",
    "ProfileNotFoundError",
    "NoProfilesError",
    "InvalidProfileNameError",
    "BridgeError",
    "CliConfigNotFoundError",
    "CliConfigParseError",
    "CliConfigIOError",
    "TokenTypeError",
    "NotLoggedInError",
    "ExternalCommandError",
    "SelectionCancelledError",
    # Config
    "AppSettings",
    "LogConfig",
    # Colors
    "ConsoleColors",
    # Logging
    "JSONFormatter",
    "SensitiveDataFilter",
    "setup_logging",
    # Settings
    "SettingsStore",
    "get_app_home",
]
