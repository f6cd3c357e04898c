"""Single-session command surface for the freshness monitor."""

from __future__ import annotations

import asyncio
import logging

from freshsense.config import MonitorConfig
from freshsense.domain.channels import channel_spec, gauge_percent
from freshsense.domain.models import SimulationMode, Snapshot
from freshsense.errors import ReadingInProgress
from freshsense.history.buffer import HistoryBuffer
from freshsense.profiles.contracts import FoodProfile
from freshsense.profiles.registry import ProfileRegistry, default_registry
from freshsense.scoring.advice import verdict_advice
from freshsense.scoring.scorer import QualityAssessment, QualityScorer, channel_status
from freshsense.session.state import ChannelReading, MonitorState
from freshsense.simulation.randomness import RandomSource, make_rng
from freshsense.simulation.synthesizer import ReadingSynthesizer

logger = logging.getLogger(__name__)


class FreshnessMonitor:
    """Owns the active profile, mode, snapshot, verdict and history of one session.

    Commands run one at a time on a single event loop. A reading cycle is the
    only suspending command; while it is in flight the session reports
    `busy` and rejects another reading or a profile switch with
    `ReadingInProgress`. A mode switch is accepted and applies to the next
    reading; the in-flight one keeps the mode it was triggered with.
    """

    def __init__(
        self,
        *,
        registry: ProfileRegistry,
        synthesizer: ReadingSynthesizer,
        scorer: QualityScorer,
        history: HistoryBuffer,
        config: MonitorConfig | None = None,
        initial_profile: str | None = None,
    ) -> None:
        self._registry = registry
        self._synthesizer = synthesizer
        self._scorer = scorer
        self._history = history
        self._config = config or MonitorConfig()
        self._busy = False
        self._readings_taken = 0

        profile = registry.get_profile(initial_profile or self._config.default_profile)
        self._mode = SimulationMode.NORMAL
        self._activate(profile)

    @classmethod
    def create(cls, config: MonitorConfig | None = None, rng: RandomSource | None = None) -> FreshnessMonitor:
        """Wire a session with the shipped catalog and a numpy random source."""
        resolved = config or MonitorConfig()
        source = rng if rng is not None else make_rng(resolved.seed)
        return cls(
            registry=default_registry(),
            synthesizer=ReadingSynthesizer(source, resolved),
            scorer=QualityScorer(),
            history=HistoryBuffer(source, resolved),
            config=resolved,
        )

    @property
    def profile(self) -> FoodProfile:
        return self._profile

    @property
    def mode(self) -> SimulationMode:
        return self._mode

    @property
    def snapshot(self) -> Snapshot:
        return self._assessment.snapshot

    @property
    def assessment(self) -> QualityAssessment:
        return self._assessment

    @property
    def history(self) -> HistoryBuffer:
        return self._history

    @property
    def busy(self) -> bool:
        """Whether a reading cycle is in flight."""
        return self._busy

    @property
    def readings_taken(self) -> int:
        return self._readings_taken

    def select_profile(self, key: str) -> FoodProfile:
        """Switch category, reset mode to normal and reseed history."""
        profile = self._registry.get_profile(key)
        if self._busy:
            logger.warning("rejected profile switch to %s: reading in progress", profile.key)
            raise ReadingInProgress("cannot switch profile while a reading is in progress")

        self._mode = SimulationMode.NORMAL
        self._activate(profile)
        logger.info("profile selected: %s", profile.key)
        return profile

    def select_mode(self, mode: SimulationMode | str) -> SimulationMode:
        """Switch simulation mode for subsequent readings."""
        try:
            resolved = SimulationMode(mode)
        except ValueError as exc:
            valid = ", ".join(item.value for item in SimulationMode)
            raise ValueError(f"unknown simulation mode: {mode!r} (expected one of: {valid})") from exc
        if resolved != self._mode:
            logger.info("simulation mode: %s -> %s", self._mode, resolved)
        self._mode = resolved
        return resolved

    async def trigger_reading(self) -> QualityAssessment:
        """Wait out the sensor latency, then synthesize, score and record a reading."""
        if self._busy:
            logger.warning("rejected reading trigger: reading already in progress")
            raise ReadingInProgress("a sensor reading is already in progress")

        self._busy = True
        profile = self._profile
        mode = self._mode
        try:
            await asyncio.sleep(self._config.read_delay_s)
            snapshot = self._synthesizer.synthesize(profile, mode)
            assessment = self._scorer.score(snapshot, profile)
        finally:
            self._busy = False

        self._assessment = assessment
        for channel, value in snapshot.values.items():
            self._history.push(channel, value)
        self._readings_taken += 1
        logger.info(
            "reading %d for %s (%s): score=%d verdict=%s",
            self._readings_taken,
            profile.key,
            mode,
            assessment.score,
            assessment.verdict,
        )
        return assessment

    def state(self) -> MonitorState:
        """Build the render view of the current session."""
        snapshot = self._assessment.snapshot
        readings: list[ChannelReading] = []
        for channel, value in snapshot.values.items():
            spec = channel_spec(channel)
            readings.append(
                ChannelReading(
                    channel=channel,
                    label=spec.label,
                    unit=spec.unit,
                    color=spec.color,
                    value=value,
                    status=channel_status(channel, value, self._profile),
                    gauge_percent=gauge_percent(channel, value),
                )
            )
        advice = verdict_advice(self._assessment.verdict)
        return MonitorState(
            profile_key=self._profile.key,
            profile_name=self._profile.name,
            mode=self._mode,
            readings=tuple(readings),
            score=self._assessment.score,
            verdict=self._assessment.verdict,
            headline=advice.headline,
            description=advice.description,
            insight=advice.insight,
            trends=tuple((channel, self._history.series(channel)) for channel in self._profile.trend_channels),
            busy=self._busy,
            readings_taken=self._readings_taken,
        )

    def _activate(self, profile: FoodProfile) -> None:
        self._profile = profile
        self._assessment = self._scorer.score(Snapshot.from_profile_baseline(profile), profile)
        self._history.reset(profile)
