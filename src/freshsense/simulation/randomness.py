"""Injectable random sources for reading synthesis."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from freshsense.config import MonitorConfig


class RandomSource(Protocol):
    """Anything yielding uniform floats in [0, 1); `numpy.random.Generator` qualifies."""

    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Production random source."""
    return np.random.default_rng(seed)


def proportional_noise(baseline: float, rng: RandomSource, config: MonitorConfig) -> float:
    """Uniform noise in [-0.5, 0.5) scaled by max(baseline * fraction, floor)."""
    scale = max(baseline * config.noise_fraction, config.noise_floor)
    return (float(rng.random()) - 0.5) * scale
