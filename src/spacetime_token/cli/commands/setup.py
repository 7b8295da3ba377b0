"""Interactive editing of the application settings."""

from __future__ import annotations

from dataclasses import replace

from spacetime_token.cli.commands.context import TokenContext
from spacetime_token.cli.interactive import prompt_with_default
from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.config import AppSettings
from spacetime_token.core.constants import BANNER_WIDTH, SETTINGS_PROMPTS


def cmd_setup(ctx: TokenContext) -> AppSettings:
    """Prompt for each setting (blank keeps the current value) and save the result.

    Returns:
        The settings that were written
    """
    print("=" * BANNER_WIDTH)
    print(ConsoleColors.info("SPACETIME-TOKEN SETUP"))
    print("=" * BANNER_WIDTH)
    print(f"Settings file: {ctx.settings_store.path}")
    print("Current configuration (leave blank to keep current value):")

    current = ctx.settings
    answers = {field: prompt_with_default(label, getattr(current, field)) for field, label in SETTINGS_PROMPTS.items()}
    updated = replace(current, **answers)

    path = ctx.settings_store.save(updated)
    ctx.settings = updated
    print(ConsoleColors.success(f"Configuration saved to {path}"))
    return updated
