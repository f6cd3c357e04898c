"""Spoilage scoring, verdicts and per-channel advisories."""

from freshsense.scoring.advice import VerdictAdvice, verdict_advice
from freshsense.scoring.scorer import (
    QualityAssessment,
    QualityScorer,
    ThresholdContribution,
    channel_status,
    verdict_for_score,
)

__all__ = [
    "QualityAssessment",
    "QualityScorer",
    "ThresholdContribution",
    "VerdictAdvice",
    "channel_status",
    "verdict_advice",
    "verdict_for_score",
]
