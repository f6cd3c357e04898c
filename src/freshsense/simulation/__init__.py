"""Reading synthesis with injectable randomness."""

from freshsense.simulation.randomness import RandomSource, make_rng, proportional_noise
from freshsense.simulation.synthesizer import ReadingSynthesizer

__all__ = ["RandomSource", "ReadingSynthesizer", "make_rng", "proportional_noise"]
