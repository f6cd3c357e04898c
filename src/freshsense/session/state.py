"""Render-ready view of a monitor session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from freshsense.domain.models import ChannelStatus, QualityVerdict, SensorChannel, SimulationMode


@dataclass(frozen=True, slots=True)
class ChannelReading:
    """Current value of one channel with its display attributes."""

    channel: SensorChannel
    label: str
    unit: str
    color: str
    value: float
    status: ChannelStatus
    gauge_percent: float


@dataclass(frozen=True, slots=True)
class MonitorState:
    """Everything a presentation layer needs to draw one frame."""

    profile_key: str
    profile_name: str
    mode: SimulationMode
    readings: tuple[ChannelReading, ...]
    score: int
    verdict: QualityVerdict
    headline: str
    description: str
    insight: str
    trends: tuple[tuple[SensorChannel, tuple[float, ...]], ...]
    busy: bool
    readings_taken: int

    def reading(self, channel: SensorChannel) -> ChannelReading | None:
        for item in self.readings:
            if item.channel == channel:
                return item
        return None

    def trend(self, channel: SensorChannel) -> tuple[float, ...] | None:
        for trend_channel, values in self.trends:
            if trend_channel == channel:
                return values
        return None


def state_to_jsonable(state: MonitorState) -> dict[str, Any]:
    """Serialize a monitor state into plain JSON-safe structures."""
    return {
        "profile": {"key": state.profile_key, "name": state.profile_name},
        "mode": state.mode.value,
        "score": state.score,
        "verdict": state.verdict.value,
        "headline": state.headline,
        "description": state.description,
        "insight": state.insight,
        "busy": state.busy,
        "readings_taken": state.readings_taken,
        "readings": [
            {
                "channel": item.channel.value,
                "label": item.label,
                "unit": item.unit,
                "color": item.color,
                "value": item.value,
                "status": item.status.value,
                "gauge_percent": round(item.gauge_percent, 2),
            }
            for item in state.readings
        ],
        "trends": {channel.value: list(values) for channel, values in state.trends},
    }
