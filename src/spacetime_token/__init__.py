"""
spacetime-token - Named login tokens for the SpacetimeDB CLI

Keeps a local store of named tokens and swaps the one the spacetime CLI
uses without touching the rest of its configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = ["__version__", "main"]

if TYPE_CHECKING:
    from spacetime_token.cli.main import main
    from spacetime_token.core.version import __version__


def __getattr__(name: str) -> Any:
    if name == "__version__":
        from spacetime_token.core.version import __version__

        return __version__
    if name == "main":
        from spacetime_token.cli.main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
