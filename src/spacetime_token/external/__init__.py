"""Interaction with the spacetime CLI: its config document and its executable."""

from spacetime_token.external.cli_config import ExternalCliConfig
from spacetime_token.external.process import run_external_command, spacetime_login, spacetime_logout

__all__ = ["ExternalCliConfig", "run_external_command", "spacetime_login", "spacetime_logout"]
