"""Handlers for the verbs that change profiles or the active token."""

from __future__ import annotations

import logging

from tomlkit import TOMLDocument

from spacetime_token.cli.commands.context import TokenContext
from spacetime_token.cli.interactive import confirm, prompt_for_selection
from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.constants import ADMIN_PROFILE_NAME, SPACETIME_CLI_COMMAND
from spacetime_token.core.exceptions import (
    CliConfigNotFoundError,
    NoProfilesError,
    NotLoggedInError,
    ProfileExistsError,
    ProfileNotFoundError,
    SelectionCancelledError,
)
from spacetime_token.external.process import spacetime_login, spacetime_logout
from spacetime_token.profiles.store import (
    Profiles,
    insert_if_absent,
    remove,
    upsert,
    validate_profile_name,
)

logger = logging.getLogger(__name__)


def _activate_token(ctx: TokenContext, token: str) -> None:
    """Copy ``token`` into the CLI config, creating the document if needed."""
    doc = ctx.cli_config.read_or_new()
    ctx.cli_config.set_token(doc, token)
    ctx.cli_config.write(doc)
    print(f"Successfully updated {ctx.cli_config.filename}.")


def _save_profiles(ctx: TokenContext, profiles: Profiles) -> None:
    ctx.profiles.save(profiles)
    print(f"Successfully updated {ctx.profiles.filename}.")


def _ensure_absent(ctx: TokenContext, profiles: Profiles, name: str, action: str) -> None:
    if name in profiles:
        raise ProfileExistsError(
            f"Profile '{name}' already exists in {ctx.profiles.filename}. Cannot {action}",
            profile_name=name,
            path=ctx.profiles.path,
            details="Use a different name or delete the existing one first",
        )


def _require_token(ctx: TokenContext, doc: TOMLDocument, when: str = "") -> str:
    """Return the active token from ``doc`` or raise NotLoggedInError."""
    token = ctx.cli_config.get_token(doc)
    if token is None:
        key = ctx.cli_config.token_key
        raise NotLoggedInError(
            f"User is not logged in. Token key '{key}' not found in {ctx.cli_config.filename}{when}",
            path=ctx.cli_config.path,
            key=key,
        )
    return token


def _available_profiles(profiles: Profiles) -> str:
    if not profiles:
        return "no profiles stored"
    return "available profiles: " + ", ".join(sorted(profiles))


# ==================== VERBS ====================


def cmd_set(ctx: TokenContext, name: str, token: str) -> None:
    """Save or update a profile and make its token active."""
    validate_profile_name(name)
    profiles = ctx.profiles.load()
    upsert(profiles, name, token)
    _save_profiles(ctx, profiles)
    print(f"Profile '{name}' saved/updated in {ctx.profiles.filename}.")

    _activate_token(ctx, token)
    print(ConsoleColors.success(f"Profile '{name}' also set as active token in {ctx.cli_config.filename}."))


def cmd_switch(ctx: TokenContext, name: str | None = None) -> str:
    """Make a stored profile's token active, prompting for one if ``name`` is omitted.

    Returns:
        The name of the profile switched to
    """
    profiles = ctx.profiles.load()

    if name is None:
        if not profiles:
            raise NoProfilesError(
                f"No profiles found in {ctx.profiles.filename}. Cannot switch",
                path=ctx.profiles.path,
                details="Add one with 'spacetime-token set' or 'spacetime-token create'",
            )
        name = prompt_for_selection(sorted(profiles), "Select profile to switch to")
        if name is None:
            raise SelectionCancelledError("No profile selected or selection cancelled")

    if name not in profiles:
        raise ProfileNotFoundError(
            f"Profile '{name}' not found in {ctx.profiles.filename}. Cannot switch",
            profile_name=name,
            path=ctx.profiles.path,
            details=_available_profiles(profiles),
        )

    _activate_token(ctx, profiles[name])
    print(
        ConsoleColors.success(
            f"Switched active token to profile '{name}' (from {ctx.profiles.filename}) "
            f"in {ctx.cli_config.filename}."
        )
    )
    return name


def cmd_admin(ctx: TokenContext) -> None:
    """Switch to the profile named ``admin``."""
    profiles = ctx.profiles.load()
    token = profiles.get(ADMIN_PROFILE_NAME)
    if token is None:
        raise ProfileNotFoundError(
            f"ADMIN profile ('{ADMIN_PROFILE_NAME}') not found in {ctx.profiles.filename}. Cannot switch",
            profile_name=ADMIN_PROFILE_NAME,
            path=ctx.profiles.path,
            details=f"Ensure a profile named '{ADMIN_PROFILE_NAME}' exists with a valid token",
        )

    _activate_token(ctx, token)
    print(
        ConsoleColors.success(
            f"Switched active token to ADMIN profile '{ADMIN_PROFILE_NAME}' "
            f"(from {ctx.profiles.filename}) in {ctx.cli_config.filename}."
        )
    )


def cmd_save(ctx: TokenContext, name: str) -> None:
    """Store the currently active CLI token under a new profile name."""
    validate_profile_name(name)
    profiles = ctx.profiles.load()
    _ensure_absent(ctx, profiles, name, "save")

    if not ctx.cli_config.exists():
        raise CliConfigNotFoundError(
            f"{ctx.cli_config.filename} does not exist. Cannot save token",
            path=ctx.cli_config.path,
            details=str(ctx.cli_config.path),
        )
    token = _require_token(ctx, ctx.cli_config.read())

    insert_if_absent(profiles, name, token, ctx.profiles.path)
    _save_profiles(ctx, profiles)
    print(ConsoleColors.success(f"Saved current active token as '{name}' in {ctx.profiles.filename}."))


def cmd_create(ctx: TokenContext, name: str, command_name: str = SPACETIME_CLI_COMMAND) -> None:
    """Log out, run the interactive login, and store the new token as ``name``."""
    validate_profile_name(name)
    profiles = ctx.profiles.load()
    _ensure_absent(ctx, profiles, name, "create")

    spacetime_logout(command_name)
    spacetime_login(command_name)

    print(f"Login successful. Saving token as '{name}'...")
    if not ctx.cli_config.exists():
        raise CliConfigNotFoundError(
            f"{ctx.cli_config.filename} does not exist after login. Cannot save token",
            path=ctx.cli_config.path,
            details=str(ctx.cli_config.path),
        )
    token = _require_token(ctx, ctx.cli_config.read(), when=" after login")

    insert_if_absent(profiles, name, token, ctx.profiles.path)
    _save_profiles(ctx, profiles)
    print(ConsoleColors.success(f"Successfully created and saved profile '{name}' in {ctx.profiles.filename}."))


def cmd_delete(ctx: TokenContext, name: str) -> None:
    """Remove a stored profile."""
    profiles = ctx.profiles.load()
    if not remove(profiles, name):
        raise ProfileNotFoundError(
            f"Profile '{name}' not found in {ctx.profiles.filename}. Nothing to delete",
            profile_name=name,
            path=ctx.profiles.path,
        )

    _save_profiles(ctx, profiles)
    print(ConsoleColors.success(f"Profile '{name}' deleted from {ctx.profiles.filename}."))


def cmd_reset(ctx: TokenContext, assume_yes: bool = False) -> bool:
    """Clear every stored profile.

    Returns:
        True if the store was reset, False if the user declined
    """
    if not assume_yes and not confirm(
        f"Delete all profiles from {ctx.profiles.filename}? This cannot be undone."
    ):
        print("Aborted.")
        return False

    ctx.profiles.reset()
    logger.info(f"Reset {ctx.profiles.path}")
    print(ConsoleColors.success(f"{ctx.profiles.filename} has been reset."))
    return True
