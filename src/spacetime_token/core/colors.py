"""Console colors and formatting utilities for spacetime-token.

Provides ANSI color codes for terminal output with auto-detection
of TTY support, the NO_COLOR convention and Windows compatibility.
"""

import os
import sys


def _colors_supported() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty() and (os.name != 'nt' or bool(os.environ.get('TERM')))


class ConsoleColors:
    """ANSI color codes for terminal output.

    Auto-detects TTY support and handles Windows compatibility.
    Use this class for all user-facing CLI output formatting.
    """
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    DIM = '\033[90m'  # Bright black / dark gray for dimmed text
    RESET = '\033[0m'

    _enabled = _colors_supported()

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        """Re-evaluate color support; ``no_color`` forces colors off."""
        cls._enabled = False if no_color else _colors_supported()

    @classmethod
    def is_enabled(cls) -> bool:
        """Check if colors are enabled."""
        return cls._enabled

    @classmethod
    def _wrap(cls, color: str, text: str) -> str:
        if cls._enabled:
            return f"{color}{text}{cls.RESET}"
        return text

    @classmethod
    def success(cls, text: str) -> str:
        """Format text as success (green)"""
        return cls._wrap(cls.GREEN, text)

    @classmethod
    def error(cls, text: str) -> str:
        """Format text as error (red)"""
        return cls._wrap(cls.RED, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format text as warning (yellow)"""
        return cls._wrap(cls.YELLOW, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format text as info (cyan)"""
        return cls._wrap(cls.CYAN, text)

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text as bold"""
        return cls._wrap(cls.BOLD, text)

    @classmethod
    def dim(cls, text: str) -> str:
        """Format text as dim/gray"""
        return cls._wrap(cls.DIM, text)

