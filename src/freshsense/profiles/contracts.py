"""Threshold and profile contracts used by the scorer and synthesizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite
from types import MappingProxyType
from typing import Mapping

from freshsense.domain.models import SensorChannel
from freshsense.errors import InvalidThreshold, UnknownChannel


@dataclass(frozen=True, slots=True)
class Threshold:
    """Spoilage rule for one channel of one profile."""

    weight: int
    max_value: float | None = None
    min_value: float | None = None

    def __post_init__(self) -> None:
        if self.max_value is None and self.min_value is None:
            raise InvalidThreshold("threshold needs at least one of max_value/min_value")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidThreshold(f"threshold weight must be an integer, got {self.weight!r}")
        if self.weight <= 0:
            raise InvalidThreshold("threshold weight must be > 0")
        for name, bound in (("max_value", self.max_value), ("min_value", self.min_value)):
            if bound is not None and not isfinite(bound):
                raise InvalidThreshold(f"{name} must be finite")

    def breaches_max(self, value: float) -> bool:
        return self.max_value is not None and value > self.max_value

    def breaches_min(self, value: float) -> bool:
        return self.min_value is not None and value < self.min_value

    def contribution(self, value: float) -> int:
        """Score contributed by one reading; both bounds count independently."""
        total = 0
        if self.breaches_max(value):
            total += self.weight
        if self.breaches_min(value):
            total += self.weight
        return total


@dataclass(frozen=True, slots=True)
class FoodProfile:
    """Baseline readings and spoilage rules for one food category."""

    key: str
    name: str
    baseline: Mapping[SensorChannel, float]
    thresholds: Mapping[SensorChannel, Threshold] = field(default_factory=dict)
    trend_channels: tuple[SensorChannel, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("profile key must not be empty")
        if self.key != self.key.strip().lower():
            raise ValueError(f"profile key must be lowercase without surrounding whitespace: {self.key!r}")
        if not self.baseline:
            raise ValueError(f"profile {self.key} must define at least one baseline channel")
        for channel, value in self.baseline.items():
            if not isinstance(channel, SensorChannel):
                raise UnknownChannel(f"profile {self.key}: baseline key {channel!r} is not a SensorChannel")
            if not isfinite(value):
                raise ValueError(f"profile {self.key}: baseline {channel.value} must be finite")

        undeclared = [c for c in self.thresholds if c not in self.baseline]
        if undeclared:
            names = ", ".join(str(c) for c in undeclared)
            raise UnknownChannel(f"profile {self.key}: thresholds reference undeclared channels: {names}")
        for channel, rule in self.thresholds.items():
            if not isinstance(rule, Threshold):
                raise InvalidThreshold(f"profile {self.key}: rule for {channel} is not a Threshold")

        missing_trend = [c for c in self.trend_channels if c not in self.baseline]
        if missing_trend:
            names = ", ".join(str(c) for c in missing_trend)
            raise UnknownChannel(f"profile {self.key}: trend channels reference undeclared channels: {names}")
        if len(set(self.trend_channels)) != len(self.trend_channels):
            raise ValueError(f"profile {self.key}: trend_channels must not contain duplicates")

        object.__setattr__(self, "baseline", MappingProxyType({c: float(v) for c, v in self.baseline.items()}))
        object.__setattr__(self, "thresholds", MappingProxyType(dict(self.thresholds)))
        object.__setattr__(self, "trend_channels", tuple(self.trend_channels))

    @property
    def channels(self) -> tuple[SensorChannel, ...]:
        """Declared channels in baseline order."""
        return tuple(self.baseline)

    def threshold(self, channel: SensorChannel) -> Threshold | None:
        return self.thresholds.get(channel)

    def ceiling(self, channel: SensorChannel) -> float:
        """Upper reference for a channel: the threshold maximum, else 1.5x baseline."""
        rule = self.thresholds.get(channel)
        if rule is not None and rule.max_value is not None:
            return rule.max_value
        return self.baseline[channel] * 1.5
