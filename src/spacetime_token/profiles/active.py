"""Active-profile detection and token masking for display."""

from __future__ import annotations

from collections.abc import Mapping

from spacetime_token.core.constants import MASK_MIN_LENGTH, MASK_VISIBLE_CHARS


def find_active_profile(profiles: Mapping[str, str], active_token: str | None) -> str | None:
    """Return the profile whose token equals ``active_token``.

    This is a linear scan. If several profiles share the token, the first
    one in store order wins.
    """
    if active_token is None:
        return None
    for name, token in profiles.items():
        if token == active_token:
            return name
    return None


def mask_token(token: str) -> str:
    """Mask a token for display.

    Tokens of 10 characters or fewer are too short to truncate meaningfully
    and are returned unchanged; longer ones keep the first and last 5
    characters.

    Examples:
        >>> mask_token("short")
        'short'
        >>> mask_token("0123456789ABCDEF")
        '01234...BCDEF'
    """
    if len(token) <= MASK_MIN_LENGTH:
        return token
    return f"{token[:MASK_VISIBLE_CHARS]}...{token[-MASK_VISIBLE_CHARS:]}"
