"""Domain models for food freshness telemetry."""

from freshsense.domain.channels import CHANNEL_SPECS, ChannelSpec, channel_spec, gauge_percent
from freshsense.domain.models import (
    BAD_INDICATOR_CHANNELS,
    ChannelStatus,
    QualityVerdict,
    SensorChannel,
    SimulationMode,
    Snapshot,
    parse_channel,
)

__all__ = [
    "BAD_INDICATOR_CHANNELS",
    "CHANNEL_SPECS",
    "ChannelSpec",
    "ChannelStatus",
    "QualityVerdict",
    "SensorChannel",
    "SimulationMode",
    "Snapshot",
    "channel_spec",
    "gauge_percent",
    "parse_channel",
]
