"""Custom exceptions for spacetime-token.

All exception classes carry enough context (file path, profile name, key)
to produce a clear, actionable message when they reach the CLI entry point.
"""

from __future__ import annotations

from pathlib import Path


class SpacetimeTokenError(Exception):
    """Base exception for all spacetime-token errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(SpacetimeTokenError):
    """Exception raised for application settings errors.

    Examples:
        - Settings file is not valid TOML
        - Settings file is missing a field
        - Config or home directory cannot be resolved or created
        - Settings file cannot be written
    """

    def __init__(self, message: str, config_file: str | Path | None = None, details: str | None = None):
        self.config_file = config_file
        super().__init__(message, details)


# ==================== PROFILE STORE ====================


class ProfileStoreError(SpacetimeTokenError):
    """Base exception for profile store errors."""

    def __init__(
        self,
        message: str,
        profile_name: str | None = None,
        path: str | Path | None = None,
        details: str | None = None,
    ):
        self.profile_name = profile_name
        self.path = path
        super().__init__(message, details)


class ProfileStoreCorruptError(ProfileStoreError):
    """Raised when the profiles file exists but cannot be parsed."""

    pass


class ProfileStoreIOError(ProfileStoreError):
    """Raised when the profiles file cannot be read, created or written."""

    pass


class ProfileExistsError(ProfileStoreError):
    """Raised when creating a profile whose name is already taken."""

    pass


class ProfileNotFoundError(ProfileStoreError):
    """Raised when a named profile is not in the store."""

    pass


class NoProfilesError(ProfileStoreError):
    """Raised when an operation needs at least one stored profile."""

    pass


class InvalidProfileNameError(ProfileStoreError):
    """Raised for empty or whitespace-only profile names."""

    pass


# ==================== EXTERNAL CLI CONFIG ====================


class BridgeError(SpacetimeTokenError):
    """Base exception for errors touching the spacetime CLI config file."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        key: str | None = None,
        details: str | None = None,
    ):
        self.path = path
        self.key = key
        super().__init__(message, details)


class CliConfigNotFoundError(BridgeError):
    """Raised when the CLI config file does not exist."""

    pass


class CliConfigParseError(BridgeError):
    """Raised when the CLI config file is not valid TOML."""

    pass


class CliConfigIOError(BridgeError):
    """Raised when the CLI config file cannot be read or written."""

    pass


class TokenTypeError(BridgeError):
    """Raised when the token key holds something other than a string."""

    pass


class NotLoggedInError(BridgeError):
    """Raised when a token is required but the token key is absent."""

    pass


# ==================== PROCESS / INTERACTION ====================


class ExternalCommandError(SpacetimeTokenError):
    """Exception raised when an external command cannot be launched or fails.

    Attributes:
        command: The command line that was run, as a single string
        returncode: Exit status, or None if the process never started
    """

    def __init__(self, command: str, returncode: int | None = None, details: str | None = None):
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"Failed to execute command '{command}'"
        else:
            message = f"Command '{command}' failed with exit status {returncode}"
        super().__init__(message, details)


class SelectionCancelledError(SpacetimeTokenError):
    """Raised when an interactive selection is cancelled or unavailable."""

    pass
