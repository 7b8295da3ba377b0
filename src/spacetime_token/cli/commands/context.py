"""Per-invocation state shared by the command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spacetime_token.core.config import AppSettings
from spacetime_token.core.settings import SettingsStore
from spacetime_token.external.cli_config import ExternalCliConfig
from spacetime_token.profiles.store import ProfileStore


@dataclass
class TokenContext:
    """Settings plus the two files every command works against.

    Attributes:
        settings: Settings loaded once at process start
        settings_store: Where ``settings`` came from (written only by ``setup``)
        profiles: The profiles file
        cli_config: The spacetime CLI config document
    """

    settings: AppSettings
    settings_store: SettingsStore
    profiles: ProfileStore
    cli_config: ExternalCliConfig

    @classmethod
    def build(
        cls,
        settings: AppSettings,
        settings_store: SettingsStore,
        home: Path | None = None,
    ) -> TokenContext:
        return cls(
            settings=settings,
            settings_store=settings_store,
            profiles=ProfileStore.from_settings(settings, settings_store.app_home),
            cli_config=ExternalCliConfig.from_settings(settings, home),
        )
