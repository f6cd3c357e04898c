"""Consumer-facing text attached to each verdict."""

from __future__ import annotations

from dataclasses import dataclass

from freshsense.domain.models import QualityVerdict


@dataclass(frozen=True, slots=True)
class VerdictAdvice:
    headline: str
    description: str
    insight: str


_ADVICE: dict[QualityVerdict, VerdictAdvice] = {
    QualityVerdict.SAFE: VerdictAdvice(
        headline="SAFE TO EAT",
        description="No spoilage biomarkers detected.",
        insight=(
            "All parameters are within the optimal freshness range for this product category. "
            "No bacterial metabolic byproducts detected."
        ),
    ),
    QualityVerdict.WARNING: VerdictAdvice(
        headline="CAUTION",
        description="Early signs of degradation detected.",
        insight=(
            "Sensors are detecting elevated levels of volatile organic compounds or temperature "
            "deviations. Recommend consuming soon or checking refrigeration."
        ),
    ),
    QualityVerdict.UNSAFE: VerdictAdvice(
        headline="UNSAFE",
        description="Hazardous bacterial or chemical levels.",
        insight=(
            "CRITICAL: High concentrations of Ammonia, H2S, or Alcohol detected indicating active "
            "decomposition or fermentation. Do not consume."
        ),
    ),
}


def verdict_advice(verdict: QualityVerdict) -> VerdictAdvice:
    """Return the badge and insight text for a verdict."""
    return _ADVICE[QualityVerdict(verdict)]
