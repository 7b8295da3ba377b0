"""CLI command handlers."""

from __future__ import annotations

from spacetime_token.cli.commands.context import TokenContext
from spacetime_token.cli.commands.profiles import (
    cmd_admin,
    cmd_create,
    cmd_delete,
    cmd_reset,
    cmd_save,
    cmd_set,
    cmd_switch,
)
from spacetime_token.cli.commands.setup import cmd_setup
from spacetime_token.cli.commands.status import cmd_current, cmd_list

__all__ = [
    "TokenContext",
    "cmd_admin",
    "cmd_create",
    "cmd_current",
    "cmd_delete",
    "cmd_list",
    "cmd_reset",
    "cmd_save",
    "cmd_set",
    "cmd_setup",
    "cmd_switch",
]
