"""Argument parsing for the spacetime-token command line."""

from __future__ import annotations

import argparse

from spacetime_token.core.constants import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS
from spacetime_token.core.version import __version__


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="spacetime-token",
        description="Manage named SpacetimeDB CLI login tokens and switch the active one",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Store a token and make it active
  spacetime-token set alice eyJhbGciOi...

  # Switch to a stored profile (omit the name to pick from a list)
  spacetime-token switch alice
  spacetime-token switch

  # Switch to the profile named 'admin'
  spacetime-token admin

  # Keep whatever token the spacetime CLI is currently using
  spacetime-token save bob

  # Log in again through the spacetime CLI and keep the new token
  spacetime-token create carol

  # Inspect
  spacetime-token list
  spacetime-token list --format json
  spacetime-token current

  # Housekeeping
  spacetime-token delete bob
  spacetime-token reset --yes
  spacetime-token setup

Exit Codes:
  0 - Success
  1 - Error occurred
  130 - Interrupted
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show program version and exit"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=VALID_LOG_LEVELS,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}, or LOG_LEVEL environment variable)",
    )

    parser.add_argument(
        "--log-format",
        type=str,
        default="text",
        choices=["text", "json"],
        help='Log output format: "text" (default) for human-readable, "json" for one JSON object per line',
    )

    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file (rotated)")

    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI color codes in console output (also honours NO_COLOR)"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    set_parser = subparsers.add_parser("set", help="Save or update a profile and make its token active")
    set_parser.add_argument("name", metavar="NAME", help="Profile name")
    set_parser.add_argument("token", metavar="TOKEN", help="Token to store")

    switch_parser = subparsers.add_parser("switch", help="Make a stored profile's token active")
    switch_parser.add_argument(
        "name", metavar="NAME", nargs="?", default=None, help="Profile name (omit to choose interactively)"
    )

    subparsers.add_parser("admin", help="Switch to the profile named 'admin'")

    save_parser = subparsers.add_parser("save", help="Store the currently active CLI token under a new name")
    save_parser.add_argument("name", metavar="NAME", help="New profile name")

    create_parser = subparsers.add_parser(
        "create", help="Log out, log in through the spacetime CLI, and store the new token"
    )
    create_parser.add_argument("name", metavar="NAME", help="New profile name")

    delete_parser = subparsers.add_parser("delete", help="Remove a stored profile")
    delete_parser.add_argument("name", metavar="NAME", help="Profile name")

    list_parser = subparsers.add_parser("list", help="List stored profiles and mark the active one")
    list_parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        default="table",
        choices=["table", "json"],
        help='Output format: "table" (default) or "json" for scripting',
    )

    subparsers.add_parser("current", help="Show which profile holds the active token")

    reset_parser = subparsers.add_parser("reset", help="Delete every stored profile")
    reset_parser.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("setup", help="Interactively edit the application settings")

    return parser.parse_args(argv)
