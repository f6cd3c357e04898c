"""Simulated sensor snapshots derived from profile baselines."""

from __future__ import annotations

import logging

from freshsense.config import MonitorConfig
from freshsense.domain.models import BAD_INDICATOR_CHANNELS, SensorChannel, SimulationMode, Snapshot
from freshsense.profiles.contracts import FoodProfile
from freshsense.simulation.randomness import RandomSource, proportional_noise

logger = logging.getLogger(__name__)


class ReadingSynthesizer:
    """Produce one plausible snapshot per call from a profile and mode."""

    def __init__(self, rng: RandomSource, config: MonitorConfig | None = None) -> None:
        self._rng = rng
        self._config = config or MonitorConfig()

    @property
    def config(self) -> MonitorConfig:
        return self._config

    def synthesize(self, profile: FoodProfile, mode: SimulationMode) -> Snapshot:
        """Return a snapshot covering every baseline channel of `profile`."""
        spoiling = SimulationMode(mode) == SimulationMode.SPOILAGE
        values: dict[SensorChannel, float] = {}
        for channel, baseline in profile.baseline.items():
            noise = proportional_noise(baseline, self._rng, self._config)
            values[channel] = round(baseline + self._escalation(channel, spoiling) + noise, 1)

        snapshot = Snapshot.for_profile(profile, values)
        logger.debug("synthesized %s snapshot for %s: %s", mode, profile.key, dict(snapshot.values))
        return snapshot

    def _escalation(self, channel: SensorChannel, spoiling: bool) -> float:
        if not spoiling:
            return 0.0
        escalation = 0.0
        if channel in BAD_INDICATOR_CHANNELS:
            escalation += self._config.spoilage_offset + float(self._rng.random()) * self._config.spoilage_jitter
        if channel == SensorChannel.TEMPERATURE:
            escalation += self._config.temperature_offset
        return escalation
