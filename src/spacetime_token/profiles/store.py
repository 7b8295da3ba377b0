"""Profile store: a flat TOML table mapping profile names to tokens.

The store is loaded fully into memory for each command and rewritten in
full on every mutation. Iteration order follows the order of keys in the
file.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from spacetime_token.core.config import AppSettings
from spacetime_token.core.constants import PROFILES_FILE_MODE
from spacetime_token.core.exceptions import (
    InvalidProfileNameError,
    ProfileExistsError,
    ProfileStoreCorruptError,
    ProfileStoreIOError,
)
from spacetime_token.core.settings import ensure_app_home

logger = logging.getLogger(__name__)

Profiles = dict[str, str]


def validate_profile_name(name: str) -> str:
    """Reject empty or whitespace-only profile names.

    Returns:
        The name, unchanged

    Raises:
        InvalidProfileNameError: If the name is empty
    """
    if not name or not name.strip():
        raise InvalidProfileNameError("Profile name cannot be empty", profile_name=name)
    return name


def upsert(profiles: Profiles, name: str, token: str) -> None:
    """Insert or overwrite ``name`` unconditionally."""
    profiles[name] = token


def insert_if_absent(profiles: Profiles, name: str, token: str, path: Path | None = None) -> None:
    """Insert ``name`` only if it is not already a key.

    Raises:
        ProfileExistsError: If ``name`` is already stored; ``profiles`` is left unchanged
    """
    if name in profiles:
        raise ProfileExistsError(
            f"Profile '{name}' already exists",
            profile_name=name,
            path=path,
            details="Use a different name or delete the existing one first",
        )
    profiles[name] = token


def remove(profiles: Profiles, name: str) -> bool:
    """Remove ``name`` and report whether it was present."""
    return profiles.pop(name, None) is not None


class ProfileStore:
    """Reads and writes the profiles file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def from_settings(cls, settings: AppSettings, app_home: Path | None = None) -> ProfileStore:
        """Build a store located at ``<app dir>/<settings.profiles_filename>``."""
        return cls(ensure_app_home(app_home) / settings.profiles_filename)

    @property
    def filename(self) -> str:
        return self.path.name

    def load(self) -> Profiles:
        """Load all profiles, creating an empty file if none exists.

        Raises:
            ProfileStoreIOError: If the file cannot be created or read
            ProfileStoreCorruptError: If the file is neither blank nor a flat table of strings
        """
        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("", encoding="utf-8")
            except OSError as e:
                raise ProfileStoreIOError(
                    "Failed to create empty profiles file", path=self.path, details=f"{self.path}: {e}"
                ) from e
            self._restrict_permissions()
            logger.info(f"Created empty {self.path}")
            return {}

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProfileStoreIOError(
                "Failed to read profiles file", path=self.path, details=f"{self.path}: {e}"
            ) from e

        if not content.strip():
            return {}

        try:
            data = tomlkit.parse(content).unwrap()
        except TOMLKitError as e:
            raise self._corrupt(str(e)) from e

        profiles: Profiles = {}
        for name, token in data.items():
            if not isinstance(token, str):
                raise self._corrupt(f"value for '{name}' must be a string, got {type(token).__name__}")
            profiles[name] = token

        logger.debug(f"Loaded {len(profiles)} profile(s) from {self.path}")
        return profiles

    def save(self, profiles: Profiles) -> None:
        """Overwrite the profiles file with ``profiles``.

        Raises:
            ProfileStoreIOError: If the mapping cannot be serialized or written
        """
        try:
            content = tomlkit.dumps(dict(profiles))
        except (TOMLKitError, TypeError, ValueError) as e:
            raise ProfileStoreIOError(
                "Failed to serialize profiles data to TOML", path=self.path, details=str(e)
            ) from e
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ProfileStoreIOError(
                "Failed to write profiles file", path=self.path, details=f"{self.path}: {e}"
            ) from e

        self._restrict_permissions()
        logger.info(f"Wrote {len(profiles)} profile(s) to {self.path}")

    def reset(self) -> None:
        """Replace the whole store with an empty one."""
        self.save({})

    def _corrupt(self, reason: str) -> ProfileStoreCorruptError:
        return ProfileStoreCorruptError(
            f"Failed to parse profiles file at {self.path}. Ensure it's valid TOML or empty",
            path=self.path,
            details=reason,
        )

    def _restrict_permissions(self) -> None:
        # Not supported on every platform/filesystem
        with contextlib.suppress(OSError):
            self.path.chmod(PROFILES_FILE_MODE)
