"""Bridge to the spacetime CLI's own TOML configuration file.

Only the configured token key is ever read or written. The document is
round-tripped through tomlkit so every other key, comment and blank line
survives a write.
"""

from __future__ import annotations

import logging
from pathlib import Path

import tomlkit
from tomlkit import TOMLDocument
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import Item

from spacetime_token.core.config import AppSettings
from spacetime_token.core.exceptions import (
    BridgeError,
    CliConfigIOError,
    CliConfigNotFoundError,
    CliConfigParseError,
    TokenTypeError,
)
from spacetime_token.core.settings import get_home_dir

logger = logging.getLogger(__name__)


def get_active_token(doc: TOMLDocument, key: str, path: Path | None = None) -> str | None:
    """Return the token stored under ``key``, or None if the key is absent.

    Raises:
        TokenTypeError: If the key is present but does not hold a string
    """
    if key not in doc:
        return None
    value = doc[key]
    if isinstance(value, Item):
        value = value.unwrap()
    if not isinstance(value, str):
        raise TokenTypeError(
            f"Token key '{key}' is not a string",
            path=path,
            key=key,
            details=f"found {type(value).__name__}" + (f" in {path}" if path else ""),
        )
    return str(value)


def set_active_token(doc: TOMLDocument, key: str, token: str) -> None:
    """Upsert ``key`` as a string, leaving the rest of the document untouched."""
    doc[key] = token


class ExternalCliConfig:
    """The spacetime CLI config document at a fixed path."""

    def __init__(self, path: Path, token_key: str):
        self.path = Path(path)
        self.token_key = token_key

    @classmethod
    def from_settings(cls, settings: AppSettings, home: Path | None = None) -> ExternalCliConfig:
        """Locate the document at ``<home>/<cli_config_dir_from_home>/<cli_config_filename>``."""
        home = home or get_home_dir()
        return cls(home / settings.cli_config_dir_from_home / settings.cli_config_filename, settings.cli_token_key)

    @property
    def filename(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> TOMLDocument:
        """Parse the document.

        Raises:
            CliConfigNotFoundError: If the file does not exist
            CliConfigIOError: If the file cannot be read
            CliConfigParseError: If the file is not valid TOML
        """
        if not self.path.exists():
            raise CliConfigNotFoundError(
                f"{self.filename} does not exist", path=self.path, details=str(self.path)
            )
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CliConfigIOError(
                f"Failed to read {self.filename}", path=self.path, details=f"{self.path}: {e}"
            ) from e
        try:
            return tomlkit.parse(content)
        except TOMLKitError as e:
            raise CliConfigParseError(
                f"Failed to parse {self.filename}", path=self.path, details=f"{self.path}: {e}"
            ) from e

    def read_or_new(self) -> TOMLDocument:
        """Parse the document, or start an empty one if the file does not exist yet."""
        if self.path.exists():
            return self.read()
        logger.info(f"{self.path} not found, starting a new document")
        return tomlkit.document()

    def write(self, doc: TOMLDocument) -> None:
        """Write the whole document back, creating parent directories if needed.

        Raises:
            CliConfigIOError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as e:
            raise CliConfigIOError(
                f"Failed to write {self.filename}", path=self.path, details=f"{self.path}: {e}"
            ) from e
        logger.info(f"Wrote {self.path}")

    def get_token(self, doc: TOMLDocument) -> str | None:
        return get_active_token(doc, self.token_key, self.path)

    def set_token(self, doc: TOMLDocument, token: str) -> None:
        set_active_token(doc, self.token_key, token)

    def active_token(self) -> str | None:
        """Best-effort read of the active token; any failure yields None."""
        if not self.path.exists():
            return None
        try:
            return self.get_token(self.read())
        except BridgeError as e:
            logger.debug(f"Ignoring unreadable active token: {e}")
            return None
