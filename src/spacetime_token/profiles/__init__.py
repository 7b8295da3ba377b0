"""Profile storage and active-profile lookup."""

from spacetime_token.profiles.active import find_active_profile, mask_token
from spacetime_token.profiles.store import ProfileStore, Profiles

__all__ = ["ProfileStore", "Profiles", "find_active_profile", "mask_token"]
