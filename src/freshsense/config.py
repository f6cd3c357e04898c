"""Runtime configuration for the freshness monitor."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

ENV_PREFIX = "FRESHSENSE_"


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Simulation constants and session defaults."""

    history_capacity: int = 10
    read_delay_s: float = 0.8
    noise_fraction: float = 0.1
    noise_floor: float = 2.0
    spoilage_offset: float = 50.0
    spoilage_jitter: float = 20.0
    temperature_offset: float = 5.0
    fresh_probability: float = 0.7
    stale_fraction: float = 0.5
    default_profile: str = "fruit"
    seed: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.history_capacity, bool) or not isinstance(self.history_capacity, int):
            raise ValueError(f"history_capacity must be an integer, got {self.history_capacity!r}")
        if self.history_capacity < 2:
            raise ValueError("history_capacity must be >= 2")
        if self.read_delay_s < 0:
            raise ValueError("read_delay_s must be >= 0")
        if self.noise_fraction < 0:
            raise ValueError("noise_fraction must be >= 0")
        if self.noise_floor <= 0:
            raise ValueError("noise_floor must be > 0")
        if self.spoilage_offset < 0 or self.spoilage_jitter < 0:
            raise ValueError("spoilage_offset and spoilage_jitter must be >= 0")
        if not 0.0 <= self.fresh_probability <= 1.0:
            raise ValueError("fresh_probability must be in [0, 1]")
        if not 0.0 <= self.stale_fraction <= 1.0:
            raise ValueError("stale_fraction must be in [0, 1]")
        if not self.default_profile.strip():
            raise ValueError("default_profile must not be empty")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise ValueError(f"seed must be an integer, got {self.seed!r}")
            if self.seed < 0:
                raise ValueError("seed must be >= 0")


_ENV_FIELDS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "HISTORY_CAPACITY": ("history_capacity", int),
    "READ_DELAY_S": ("read_delay_s", float),
    "DEFAULT_PROFILE": ("default_profile", str),
    "SEED": ("seed", int),
}


def load_config(environ: Mapping[str, str] | None = None, *, base: MonitorConfig | None = None) -> MonitorConfig:
    """Apply `FRESHSENSE_*` environment overrides on top of `base`."""
    env = os.environ if environ is None else environ
    config = base or MonitorConfig()
    for suffix, (field_name, parse) in _ENV_FIELDS.items():
        variable = f"{ENV_PREFIX}{suffix}"
        raw = env.get(variable)
        if raw is None or not raw.strip():
            continue
        try:
            config = replace(config, **{field_name: parse(raw.strip())})
        except ValueError as exc:
            raise ValueError(f"invalid value for {variable}: {raw!r} ({exc})") from exc
    return config
