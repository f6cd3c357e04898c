"""Food profile catalog and threshold contracts."""

from freshsense.profiles.contracts import FoodProfile, Threshold
from freshsense.profiles.registry import ProfileRegistry, build_default_profiles, default_registry, get_profile

__all__ = [
    "FoodProfile",
    "ProfileRegistry",
    "Threshold",
    "build_default_profiles",
    "default_registry",
    "get_profile",
]
