"""Weighted spoilage scoring against per-profile thresholds."""

from __future__ import annotations

from dataclasses import dataclass

from freshsense.domain.models import ChannelStatus, QualityVerdict, SensorChannel, Snapshot
from freshsense.profiles.contracts import FoodProfile

UNSAFE_SCORE = 3
WARNING_SCORE = 1
DANGER_MAX_FACTOR = 1.5
DANGER_MIN_FACTOR = 0.7


@dataclass(frozen=True, slots=True)
class ThresholdContribution:
    """Score added by a single (channel, threshold) pair."""

    channel: SensorChannel
    value: float
    points: int


@dataclass(frozen=True, slots=True)
class QualityAssessment:
    """Score and verdict produced for one snapshot."""

    snapshot: Snapshot
    score: int
    verdict: QualityVerdict
    contributions: tuple[ThresholdContribution, ...] = ()
    reasons: tuple[str, ...] = ()

    @property
    def triggered_channels(self) -> tuple[SensorChannel, ...]:
        return tuple(item.channel for item in self.contributions if item.points > 0)

    def as_tuple(self) -> tuple[int, QualityVerdict]:
        return self.score, self.verdict


def verdict_for_score(score: int) -> QualityVerdict:
    """Fixed mapping: >= 3 unsafe, >= 1 warning, else safe."""
    if score >= UNSAFE_SCORE:
        return QualityVerdict.UNSAFE
    if score >= WARNING_SCORE:
        return QualityVerdict.WARNING
    return QualityVerdict.SAFE


def channel_status(channel: SensorChannel, value: float, profile: FoodProfile) -> ChannelStatus:
    """Advisory status of one reading, independent of the aggregate verdict."""
    rule = profile.threshold(channel)
    if rule is None:
        return ChannelStatus.GOOD

    if rule.max_value is not None:
        if value > rule.max_value * DANGER_MAX_FACTOR:
            return ChannelStatus.DANGER
        if value > rule.max_value:
            return ChannelStatus.WARNING
    if rule.min_value is not None:
        if value < rule.min_value * DANGER_MIN_FACTOR:
            return ChannelStatus.DANGER
        if value < rule.min_value:
            return ChannelStatus.WARNING
    return ChannelStatus.GOOD


class QualityScorer:
    """Evaluate snapshots against a profile's weighted thresholds."""

    def score(self, snapshot: Snapshot, profile: FoodProfile) -> QualityAssessment:
        """Sum independent per-threshold contributions and map to a verdict."""
        if snapshot.profile_key != profile.key:
            raise ValueError(
                f"snapshot belongs to profile {snapshot.profile_key}, cannot score against {profile.key}"
            )

        contributions: list[ThresholdContribution] = []
        reasons: list[str] = []
        for channel, rule in profile.thresholds.items():
            value = snapshot.get(channel)
            if value is None:
                continue

            points = rule.contribution(value)
            contributions.append(ThresholdContribution(channel=channel, value=value, points=points))
            if rule.breaches_max(value):
                reasons.append(f"{channel.value} above maximum {rule.max_value}: {value}")
            if rule.breaches_min(value):
                reasons.append(f"{channel.value} below minimum {rule.min_value}: {value}")

        total = sum(item.points for item in contributions)
        return QualityAssessment(
            snapshot=snapshot,
            score=total,
            verdict=verdict_for_score(total),
            contributions=tuple(contributions),
            reasons=tuple(reasons),
        )

    def channel_statuses(self, snapshot: Snapshot, profile: FoodProfile) -> dict[SensorChannel, ChannelStatus]:
        """Advisory status for every channel in the snapshot."""
        return {channel: channel_status(channel, value, profile) for channel, value in snapshot.values.items()}
