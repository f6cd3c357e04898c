"""Display metadata for sensor channels."""

from __future__ import annotations

from dataclasses import dataclass

from freshsense.domain.models import SensorChannel


@dataclass(frozen=True, slots=True)
class ChannelSpec:
    """Label, unit and gauge scale used when rendering one channel."""

    channel: SensorChannel
    label: str
    unit: str
    color: str
    display_max: float

    def __post_init__(self) -> None:
        if self.display_max <= 0:
            raise ValueError("display_max must be > 0")


CHANNEL_SPECS: dict[SensorChannel, ChannelSpec] = {
    SensorChannel.TEMPERATURE: ChannelSpec(SensorChannel.TEMPERATURE, "Temperature", "°C", "#fbbf24", 30.0),
    SensorChannel.HUMIDITY: ChannelSpec(SensorChannel.HUMIDITY, "Humidity", "%", "#38bdf8", 100.0),
    SensorChannel.AMMONIA: ChannelSpec(SensorChannel.AMMONIA, "Ammonia (NH3)", "ppm", "#f43f5e", 50.0),
    SensorChannel.HYDROGEN_SULFIDE: ChannelSpec(
        SensorChannel.HYDROGEN_SULFIDE, "Hydrogen Sulfide (H2S)", "ppm", "#a855f7", 10.0
    ),
    SensorChannel.VOLATILE_ORGANICS: ChannelSpec(
        SensorChannel.VOLATILE_ORGANICS, "Total VOCs", "ppb", "#3b82f6", 500.0
    ),
    SensorChannel.ETHYLENE: ChannelSpec(SensorChannel.ETHYLENE, "Ethylene", "ppm", "#84cc16", 200.0),
    SensorChannel.ALCOHOL: ChannelSpec(SensorChannel.ALCOHOL, "Alcohol/Ethanol", "ppm", "#f97316", 100.0),
    SensorChannel.TURBIDITY: ChannelSpec(SensorChannel.TURBIDITY, "Turbidity", "NTU", "#94a3b8", 100.0),
}


def channel_spec(channel: SensorChannel) -> ChannelSpec:
    """Return display metadata for a channel."""
    return CHANNEL_SPECS[channel]


def gauge_percent(channel: SensorChannel, value: float) -> float:
    """Fill level of a channel gauge in percent, clamped to [0, 100]."""
    ceiling = CHANNEL_SPECS[channel].display_max * 1.5
    return min(100.0, max(0.0, value / ceiling * 100.0))
