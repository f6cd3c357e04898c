"""Read-only registry of food profiles and the shipped catalog."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator

from freshsense.domain.models import SensorChannel
from freshsense.errors import UnknownProfile
from freshsense.profiles.contracts import FoodProfile, Threshold

T = SensorChannel

# Short keys used by earlier dashboard builds.
_LEGACY_KEY_ALIASES: dict[str, str] = {
    "banana": "fruit",
    "milk": "pasteurized-milk",
    "meat": "raw-meat",
    "egg": "eggs",
    "veggies": "vegetables",
}


class ProfileRegistry:
    """Immutable catalog of food profiles keyed by category."""

    def __init__(self, profiles: Iterable[FoodProfile], *, aliases: dict[str, str] | None = None) -> None:
        catalog: dict[str, FoodProfile] = {}
        for profile in profiles:
            if profile.key in catalog:
                raise ValueError(f"duplicate profile key: {profile.key}")
            catalog[profile.key] = profile
        if not catalog:
            raise ValueError("registry needs at least one profile")

        resolved_aliases: dict[str, str] = {}
        for alias, target in (aliases or {}).items():
            normalized_alias = alias.strip().lower()
            if normalized_alias in catalog:
                raise ValueError(f"alias collides with a profile key: {alias}")
            if normalized_alias in resolved_aliases:
                raise ValueError(f"duplicate alias after normalization: {alias}")
            resolved_aliases[normalized_alias] = target.strip().lower()
        dangling = sorted(alias for alias, target in resolved_aliases.items() if target not in catalog)
        if dangling:
            raise ValueError(f"aliases point to unknown profiles: {', '.join(dangling)}")

        self._profiles = MappingProxyType(catalog)
        self._aliases = MappingProxyType(resolved_aliases)

    def get_profile(self, key: str) -> FoodProfile:
        """Return the profile for `key`; raise `UnknownProfile` otherwise."""
        if not isinstance(key, str):
            raise UnknownProfile(repr(key), self.keys())
        normalized = key.strip().lower()
        normalized = self._aliases.get(normalized, normalized)
        try:
            return self._profiles[normalized]
        except KeyError as exc:
            raise UnknownProfile(str(key), self.keys()) from exc

    def keys(self) -> tuple[str, ...]:
        return tuple(self._profiles)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        normalized = key.strip().lower()
        return self._aliases.get(normalized, normalized) in self._profiles

    def __iter__(self) -> Iterator[FoodProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


def build_default_profiles() -> tuple[FoodProfile, ...]:
    """Shipped food categories with their baseline readings and rules."""
    return (
        FoodProfile(
            key="fruit",
            name="Banana (Fruit)",
            baseline={
                T.TEMPERATURE: 18, T.HUMIDITY: 85, T.VOLATILE_ORGANICS: 100, T.AMMONIA: 0,
                T.HYDROGEN_SULFIDE: 0, T.ETHYLENE: 10, T.ALCOHOL: 0,
            },
            thresholds={
                T.ETHYLENE: Threshold(max_value=150, weight=2),
                T.ALCOHOL: Threshold(max_value=50, weight=3),
                T.TEMPERATURE: Threshold(max_value=30, weight=1),
            },
            trend_channels=(T.TEMPERATURE, T.ETHYLENE, T.ALCOHOL),
        ),
        FoodProfile(
            key="pasteurized-milk",
            name="Pasteurized Milk",
            baseline={
                T.TEMPERATURE: 4, T.HUMIDITY: 90, T.VOLATILE_ORGANICS: 20, T.AMMONIA: 0,
                T.HYDROGEN_SULFIDE: 0, T.ETHYLENE: 0, T.ALCOHOL: 0, T.TURBIDITY: 5,
            },
            thresholds={
                T.TEMPERATURE: Threshold(max_value=7, weight=3),
                T.VOLATILE_ORGANICS: Threshold(max_value=300, weight=2),
                T.AMMONIA: Threshold(max_value=10, weight=1),
                T.TURBIDITY: Threshold(max_value=50, weight=2),
            },
            trend_channels=(T.TEMPERATURE, T.VOLATILE_ORGANICS, T.TURBIDITY),
        ),
        FoodProfile(
            key="raw-meat",
            name="Raw Meat (Poultry/Beef)",
            baseline={
                T.TEMPERATURE: 2, T.HUMIDITY: 80, T.VOLATILE_ORGANICS: 50, T.AMMONIA: 2,
                T.HYDROGEN_SULFIDE: 0, T.ETHYLENE: 0, T.ALCOHOL: 0,
            },
            thresholds={
                T.AMMONIA: Threshold(max_value=25, weight=3),
                T.HYDROGEN_SULFIDE: Threshold(max_value=2, weight=3),
                T.TEMPERATURE: Threshold(max_value=5, weight=2),
            },
            trend_channels=(T.TEMPERATURE, T.AMMONIA, T.VOLATILE_ORGANICS),
        ),
        FoodProfile(
            key="eggs",
            name="Chicken Eggs",
            baseline={
                T.TEMPERATURE: 10, T.HUMIDITY: 70, T.VOLATILE_ORGANICS: 10, T.AMMONIA: 0,
                T.HYDROGEN_SULFIDE: 0, T.ETHYLENE: 0, T.ALCOHOL: 0,
            },
            thresholds={
                T.HYDROGEN_SULFIDE: Threshold(max_value=5, weight=3),
                T.AMMONIA: Threshold(max_value=15, weight=2),
            },
            trend_channels=(T.TEMPERATURE, T.AMMONIA, T.HYDROGEN_SULFIDE),
        ),
        FoodProfile(
            key="vegetables",
            name="Fresh Vegetables",
            baseline={
                T.TEMPERATURE: 5, T.HUMIDITY: 95, T.VOLATILE_ORGANICS: 30, T.AMMONIA: 0,
                T.HYDROGEN_SULFIDE: 0, T.ETHYLENE: 5, T.ALCOHOL: 0,
            },
            thresholds={
                T.HUMIDITY: Threshold(min_value=80, weight=1),
                T.VOLATILE_ORGANICS: Threshold(max_value=200, weight=2),
                T.TEMPERATURE: Threshold(max_value=10, weight=1),
            },
            trend_channels=(T.TEMPERATURE, T.HUMIDITY, T.VOLATILE_ORGANICS),
        ),
    )


@lru_cache(maxsize=1)
def default_registry() -> ProfileRegistry:
    """Process-wide registry of the shipped categories."""
    return ProfileRegistry(build_default_profiles(), aliases=_LEGACY_KEY_ALIASES)


def get_profile(key: str) -> FoodProfile:
    """Look up a shipped profile by key."""
    return default_registry().get_profile(key)
