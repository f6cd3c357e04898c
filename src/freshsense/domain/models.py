"""Core domain models for freshsense."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from math import isfinite
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from freshsense.errors import UnknownChannel

if TYPE_CHECKING:
    from freshsense.profiles.contracts import FoodProfile


class SensorChannel(StrEnum):
    """Supported sensor channels of the freshness probe."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    AMMONIA = "ammonia"
    HYDROGEN_SULFIDE = "hydrogen-sulfide"
    VOLATILE_ORGANICS = "volatile-organics"
    ETHYLENE = "ethylene"
    ALCOHOL = "alcohol"
    TURBIDITY = "turbidity"


class SimulationMode(StrEnum):
    """How the synthesizer drives readings."""

    NORMAL = "normal"
    SPOILAGE = "spoilage"


class QualityVerdict(StrEnum):
    """Aggregate freshness classification for one snapshot."""

    SAFE = "safe"
    WARNING = "warning"
    UNSAFE = "unsafe"


class ChannelStatus(StrEnum):
    """Advisory status of a single channel reading."""

    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


# Rising values on these channels signal decomposition.
BAD_INDICATOR_CHANNELS: frozenset[SensorChannel] = frozenset(
    {
        SensorChannel.AMMONIA,
        SensorChannel.HYDROGEN_SULFIDE,
        SensorChannel.VOLATILE_ORGANICS,
        SensorChannel.ETHYLENE,
        SensorChannel.ALCOHOL,
        SensorChannel.TURBIDITY,
    }
)

_CHANNEL_ALIASES: dict[str, SensorChannel] = {
    "temp": SensorChannel.TEMPERATURE,
    "rh": SensorChannel.HUMIDITY,
    "nh3": SensorChannel.AMMONIA,
    "h2s": SensorChannel.HYDROGEN_SULFIDE,
    "hydrogen_sulfide": SensorChannel.HYDROGEN_SULFIDE,
    "voc": SensorChannel.VOLATILE_ORGANICS,
    "volatile_organics": SensorChannel.VOLATILE_ORGANICS,
    "ethyl": SensorChannel.ETHYLENE,
    "ethanol": SensorChannel.ALCOHOL,
}


def parse_channel(name: str | SensorChannel) -> SensorChannel:
    """Resolve a channel id or known alias to a `SensorChannel`."""
    if isinstance(name, SensorChannel):
        return name
    normalized = name.strip().lower()
    try:
        return SensorChannel(normalized)
    except ValueError:
        pass
    try:
        return _CHANNEL_ALIASES[normalized]
    except KeyError as exc:
        valid = ", ".join(channel.value for channel in SensorChannel)
        raise UnknownChannel(f"unknown sensor channel: {name!r} (expected one of: {valid})") from exc


@dataclass(frozen=True, slots=True)
class Snapshot:
    """One full set of simulated sensor values for a single profile."""

    profile_key: str
    values: Mapping[SensorChannel, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.profile_key:
            raise ValueError("profile_key must not be empty")
        for channel, value in self.values.items():
            if not isinstance(channel, SensorChannel):
                raise UnknownChannel(f"snapshot keys must be SensorChannel, got {channel!r}")
            if not isfinite(value):
                raise ValueError(f"snapshot value for {channel.value} must be finite")
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def for_profile(cls, profile: FoodProfile, values: Mapping[SensorChannel, float]) -> Snapshot:
        """Build a snapshot whose channel set matches the profile exactly."""
        declared = set(profile.channels)
        provided = set(values)
        missing = declared - provided
        extra = provided - declared
        if missing or extra:
            raise UnknownChannel(
                f"snapshot channels do not match profile {profile.key}: "
                f"missing={sorted(c.value for c in missing)}, extra={sorted(c.value for c in extra)}"
            )
        ordered = {channel: float(values[channel]) for channel in profile.channels}
        return cls(profile_key=profile.key, values=ordered)

    @classmethod
    def from_profile_baseline(cls, profile: FoodProfile) -> Snapshot:
        """Return the resting snapshot of a profile."""
        return cls.for_profile(profile, profile.baseline)

    @property
    def channels(self) -> tuple[SensorChannel, ...]:
        return tuple(self.values)

    def get(self, channel: SensorChannel) -> float | None:
        """Return the reading of a channel if present."""
        return self.values.get(channel)
