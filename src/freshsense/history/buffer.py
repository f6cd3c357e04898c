"""Fixed-capacity rolling history per sensor channel."""

from __future__ import annotations

import logging
from collections import deque

from freshsense.config import MonitorConfig
from freshsense.domain.models import SensorChannel
from freshsense.errors import UnknownChannel
from freshsense.profiles.contracts import FoodProfile
from freshsense.simulation.randomness import RandomSource, proportional_noise

logger = logging.getLogger(__name__)


class HistoryBuffer:
    """Per-channel FIFO windows of exactly `capacity` values.

    `reset` fills every window with synthetic points so trend charts are
    populated right after a profile switch; `live_count` tells how many of
    the points currently in a window were pushed from real reading cycles.
    """

    def __init__(self, rng: RandomSource, config: MonitorConfig | None = None) -> None:
        self._rng = rng
        self._config = config or MonitorConfig()
        self._capacity = self._config.history_capacity
        self._windows: dict[SensorChannel, deque[float]] = {}
        self._live_counts: dict[SensorChannel, int] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def channels(self) -> tuple[SensorChannel, ...]:
        return tuple(self._windows)

    def push(self, channel: SensorChannel, value: float) -> None:
        """Append a live value, evicting the oldest entry."""
        try:
            window = self._windows[channel]
        except KeyError as exc:
            raise UnknownChannel(f"history does not track channel: {channel}") from exc
        window.append(float(value))
        self._live_counts[channel] = min(self._live_counts[channel] + 1, self._capacity)

    def series(self, channel: SensorChannel) -> tuple[float, ...]:
        """Oldest-to-newest values of a channel."""
        try:
            return tuple(self._windows[channel])
        except KeyError as exc:
            raise UnknownChannel(f"history does not track channel: {channel}") from exc

    def live_count(self, channel: SensorChannel) -> int:
        """Number of pushed values in the window since the last reset."""
        if channel not in self._live_counts:
            raise UnknownChannel(f"history does not track channel: {channel}")
        return self._live_counts[channel]

    def reset(self, profile: FoodProfile) -> None:
        """Reseed every baseline channel; the newest slot equals the baseline."""
        windows: dict[SensorChannel, deque[float]] = {}
        for channel, baseline in profile.baseline.items():
            points = [self._seed_point(profile, channel, baseline) for _ in range(self._capacity - 1)]
            points.append(baseline)
            windows[channel] = deque(points, maxlen=self._capacity)

        self._windows = windows
        self._live_counts = {channel: 0 for channel in windows}
        logger.debug("history reseeded for %s (%d points per channel)", profile.key, self._capacity)

    def _seed_point(self, profile: FoodProfile, channel: SensorChannel, baseline: float) -> float:
        if float(self._rng.random()) < self._config.fresh_probability:
            value = baseline + proportional_noise(baseline, self._rng, self._config)
        else:
            distance = profile.ceiling(channel) - baseline
            value = baseline + float(self._rng.random()) * self._config.stale_fraction * distance
        return round(max(0.0, value), 1)
