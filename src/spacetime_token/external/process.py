"""Run the spacetime CLI as a child process sharing this terminal."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from spacetime_token.core.colors import ConsoleColors
from spacetime_token.core.constants import LOGIN_ARGS, LOGOUT_ARGS, SPACETIME_CLI_COMMAND
from spacetime_token.core.exceptions import ExternalCommandError

logger = logging.getLogger(__name__)


def run_external_command(command_name: str, args: Sequence[str]) -> None:
    """Run ``command_name args...`` with inherited stdin/stdout/stderr.

    Blocks until the process exits.

    Raises:
        ExternalCommandError: If the command cannot be launched or exits non-zero
    """
    cmd = [command_name, *args]
    display = " ".join(cmd)
    print(ConsoleColors.dim(f"Running: {display}..."))
    logger.info(f"Executing {cmd}")

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        raise ExternalCommandError(display, details=f"{e}. Is '{command_name}' in your PATH?") from e

    if result.returncode != 0:
        raise ExternalCommandError(display, returncode=result.returncode)

    print(f"Command '{display}' executed successfully.")


def spacetime_logout(command_name: str = SPACETIME_CLI_COMMAND) -> None:
    run_external_command(command_name, LOGOUT_ARGS)


def spacetime_login(command_name: str = SPACETIME_CLI_COMMAND) -> None:
    """Start the interactive server-issued local login flow."""
    print(f"Please follow the prompts from '{command_name} {' '.join(LOGIN_ARGS)}'.")
    run_external_command(command_name, LOGIN_ARGS)
