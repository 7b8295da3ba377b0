"""CLI module - Command-line interface components."""

from spacetime_token.cli.interactive import confirm, prompt_for_selection, prompt_with_default
from spacetime_token.cli.main import main
from spacetime_token.cli.parser import parse_arguments

__all__ = [
    "confirm",
    "main",
    "parse_arguments",
    "prompt_for_selection",
    "prompt_with_default",
]
