"""Read-only handlers: list and current."""

from __future__ import annotations

import json

from spacetime_token.cli.commands.context import TokenContext
from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.exceptions import TokenTypeError
from spacetime_token.profiles.active import find_active_profile, mask_token


def cmd_list(ctx: TokenContext, output_format: str = "table") -> None:
    """List stored profile names, marking the one holding the active token.

    Args:
        ctx: Command context
        output_format: "table" (default) or "json"
    """
    profiles = ctx.profiles.load()
    current = find_active_profile(profiles, ctx.cli_config.active_token())
    names = sorted(profiles)

    if output_format == "json":
        payload = {
            "profiles": [{"name": name, "current": name == current} for name in names],
            "count": len(names),
            "current": current,
        }
        print(json.dumps(payload, indent=2))
        return

    if not names:
        print(f"No profiles found in {ctx.profiles.filename}.")
        return

    print(f"Available profiles in {ctx.profiles.filename}:")
    for name in names:
        if name == current:
            print(ConsoleColors.success(f"- {name} (current)"))
        else:
            print(f"- {name}")


def cmd_current(ctx: TokenContext) -> None:
    """Report which profile, if any, holds the active token, and show it masked."""
    cli_config = ctx.cli_config
    if not cli_config.exists():
        print(f"{cli_config.filename} not found. No active token set.")
        return

    doc = cli_config.read()
    try:
        active_token = cli_config.get_token(doc)
    except TokenTypeError:
        print(
            ConsoleColors.warning(
                f"Active token key '{cli_config.token_key}' in {cli_config.filename} is not a string."
            )
        )
        return

    if active_token is None:
        print(f"No active token (key '{cli_config.token_key}') found in {cli_config.filename}.")
        return

    name = find_active_profile(ctx.profiles.load(), active_token)
    if name is not None:
        print(f"Current active profile: {ConsoleColors.bold(name)}")
    else:
        print(
            "Current active token is set, but not found under any profile name "
            f"in {ctx.profiles.filename}."
        )
    print(f"Active token: {mask_token(active_token)}")
