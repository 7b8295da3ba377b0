"""CLI entrypoint: parse arguments, configure logging, dispatch one verb."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import NoReturn

from spacetime_token.cli.commands import (
    TokenContext,
    cmd_admin,
    cmd_create,
    cmd_current,
    cmd_delete,
    cmd_list,
    cmd_reset,
    cmd_save,
    cmd_set,
    cmd_setup,
    cmd_switch,
)
from spacetime_token.cli.parser import parse_arguments
from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.config import AppSettings, LogConfig
from spacetime_token.core.exceptions import ConfigError, SpacetimeTokenError
from spacetime_token.core.logging import setup_logging
from spacetime_token.core.settings import SettingsStore

logger = logging.getLogger(__name__)

COMMANDS: dict[str, Callable[[TokenContext, argparse.Namespace], object]] = {
    "set": lambda ctx, args: cmd_set(ctx, args.name, args.token),
    "switch": lambda ctx, args: cmd_switch(ctx, args.name),
    "admin": lambda ctx, args: cmd_admin(ctx),
    "save": lambda ctx, args: cmd_save(ctx, args.name),
    "create": lambda ctx, args: cmd_create(ctx, args.name),
    "delete": lambda ctx, args: cmd_delete(ctx, args.name),
    "list": lambda ctx, args: cmd_list(ctx, args.output_format),
    "current": lambda ctx, args: cmd_current(ctx),
    "reset": lambda ctx, args: cmd_reset(ctx, assume_yes=args.yes),
    "setup": lambda ctx, args: cmd_setup(ctx),
}


def _exit_error(msg: str, code: int = 1) -> NoReturn:
    """Print a coloured error message to stderr and exit."""
    print(ConsoleColors.error(f"ERROR: {msg}"), file=sys.stderr)
    sys.exit(code)


def _build_context(args: argparse.Namespace) -> TokenContext:
    """Load settings once and bind the stores every handler works against.

    ``setup`` must stay usable when the settings file is broken, so for that
    verb a load failure falls back to the defaults with a warning.
    """
    settings_store = SettingsStore()
    try:
        settings = settings_store.load()
    except ConfigError as e:
        if args.command != "setup":
            raise
        logger.debug(f"Settings load failed during setup: {e}")
        print(
            ConsoleColors.warning(f"Warning: could not load existing settings ({e}). Starting from defaults."),
            file=sys.stderr,
        )
        settings = AppSettings()
    return TokenContext.build(settings, settings_store)


def _main_impl(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)

    # Configure global color policy for all ConsoleColors call sites.
    ConsoleColors.configure(no_color=args.no_color)
    setup_logging(LogConfig.from_args(args))

    logger.debug(f"Running command '{args.command}'")
    ctx = _build_context(args)
    COMMANDS[args.command](ctx, args)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the script"""
    try:
        _main_impl(argv)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        _exit_error("Operation cancelled by user", code=130)
    except SpacetimeTokenError as e:
        logger.debug("Command failed", exc_info=True)
        _exit_error(str(e))


if __name__ == "__main__":
    main()
