"""Tests for monitor configuration and environment overrides."""

from __future__ import annotations

import pytest

from freshsense.config import MonitorConfig, load_config


def test_defaults_match_dashboard_behaviour() -> None:
    config = MonitorConfig()

    assert config.history_capacity == 10
    assert config.read_delay_s == pytest.approx(0.8)
    assert config.fresh_probability == pytest.approx(0.7)
    assert config.default_profile == "fruit"
    assert config.seed is None


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"history_capacity": 1}, "history_capacity"),
        ({"history_capacity": 2.5}, "history_capacity must be an integer"),
        ({"history_capacity": True}, "history_capacity must be an integer"),
        ({"seed": -1}, "seed must be >= 0"),
        ({"seed": 1.5}, "seed must be an integer"),
        ({"read_delay_s": -0.1}, "read_delay_s"),
        ({"noise_floor": 0.0}, "noise_floor"),
        ({"fresh_probability": 1.5}, "fresh_probability"),
        ({"stale_fraction": -0.1}, "stale_fraction"),
        ({"default_profile": "  "}, "default_profile"),
    ],
)
def test_config_validation(kwargs: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        MonitorConfig(**kwargs)  # type: ignore[arg-type]


def test_load_config_applies_environment_overrides() -> None:
    config = load_config(
        {
            "FRESHSENSE_HISTORY_CAPACITY": "12",
            "FRESHSENSE_READ_DELAY_S": "0",
            "FRESHSENSE_DEFAULT_PROFILE": "eggs",
            "FRESHSENSE_SEED": "7",
            "UNRELATED": "x",
        }
    )

    assert config.history_capacity == 12
    assert config.read_delay_s == 0.0
    assert config.default_profile == "eggs"
    assert config.seed == 7


def test_load_config_ignores_blank_values_and_keeps_base() -> None:
    base = MonitorConfig(history_capacity=11)
    config = load_config({"FRESHSENSE_HISTORY_CAPACITY": "  "}, base=base)

    assert config == base


def test_load_config_names_malformed_variable() -> None:
    with pytest.raises(ValueError, match="FRESHSENSE_READ_DELAY_S"):
        load_config({"FRESHSENSE_READ_DELAY_S": "soon"})


def test_load_config_still_validates_values() -> None:
    with pytest.raises(ValueError, match="FRESHSENSE_HISTORY_CAPACITY.*history_capacity must be >= 2"):
        load_config({"FRESHSENSE_HISTORY_CAPACITY": "1"})


def test_negative_seed_from_environment_is_rejected_with_variable_name() -> None:
    with pytest.raises(ValueError, match="FRESHSENSE_SEED.*seed must be >= 0"):
        load_config({"FRESHSENSE_SEED": "-1"})
