"""Version information for spacetime-token."""

__version__ = "0.1.0"
