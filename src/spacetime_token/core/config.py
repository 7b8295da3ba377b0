"""Configuration dataclasses for spacetime-token.

These dataclasses centralize all configuration options for type safety
and easy testing. ``AppSettings`` is persisted to ``config.toml``;
``LogConfig`` is built from command-line arguments.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, fields
from typing import Any

from spacetime_token.core.constants import (
    DEFAULT_CLI_CONFIG_DIR_FROM_HOME,
    DEFAULT_CLI_CONFIG_FILENAME,
    DEFAULT_CLI_TOKEN_KEY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROFILES_FILENAME,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
)


@dataclass
class AppSettings:
    """Application settings stored in ``config.toml``.

    Attributes:
        profiles_filename: Name of the profiles file inside the app config directory
        cli_config_dir_from_home: Directory of the spacetime CLI config, relative to home
        cli_config_filename: File name of the spacetime CLI config
        cli_token_key: Key holding the active token inside the CLI config
    """

    profiles_filename: str = DEFAULT_PROFILES_FILENAME
    cli_config_dir_from_home: str = DEFAULT_CLI_CONFIG_DIR_FROM_HOME
    cli_config_filename: str = DEFAULT_CLI_CONFIG_FILENAME
    cli_token_key: str = DEFAULT_CLI_TOKEN_KEY

    def to_dict(self) -> dict[str, str]:
        """Convert to a plain dictionary for serialization."""
        return {
            "profiles_filename": self.profiles_filename,
            "cli_config_dir_from_home": self.cli_config_dir_from_home,
            "cli_config_filename": self.cli_config_filename,
            "cli_token_key": self.cli_token_key,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppSettings:
        """Build settings from a parsed document.

        Every field must be present and hold a string. Unknown keys are ignored.

        Raises:
            ValueError: If a field is missing or is not a string
        """
        values = {}
        for f in fields(cls):
            if f.name not in data:
                raise ValueError(f"missing field '{f.name}'")
            value = data[f.name]
            if not isinstance(value, str):
                raise ValueError(f"field '{f.name}' must be a string, got {type(value).__name__}")
            values[f.name] = str(value)
        return cls(**values)


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "WARNING")
        format: "text" or "json"
        file: Optional log file path; console only when None
        file_max_bytes: Maximum size per log file (default: 1MB)
        file_backup_count: Number of backup log files (default: 3)
    """

    level: str = DEFAULT_LOG_LEVEL
    format: str = "text"
    file: str | None = None
    file_max_bytes: int = LOG_FILE_MAX_BYTES
    file_backup_count: int = LOG_FILE_BACKUP_COUNT

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> LogConfig:
        """Create configuration from parsed command-line arguments.

        Priority for the level: 1) --log-level, 2) LOG_LEVEL env var, 3) default.
        """
        level = getattr(args, "log_level", None) or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
        return cls(
            level=level.upper(),
            format=getattr(args, "log_format", "text") or "text",
            file=getattr(args, "log_file", None),
        )
