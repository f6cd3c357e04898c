"""Tests for channel identifiers, snapshots and display metadata."""

from __future__ import annotations

import pytest

from freshsense.domain import (
    BAD_INDICATOR_CHANNELS,
    CHANNEL_SPECS,
    SensorChannel,
    Snapshot,
    gauge_percent,
    parse_channel,
)
from freshsense.errors import UnknownChannel
from freshsense.profiles import get_profile


def test_parse_channel_accepts_values_and_aliases() -> None:
    assert parse_channel("hydrogen-sulfide") == SensorChannel.HYDROGEN_SULFIDE
    assert parse_channel(" VOC ") == SensorChannel.VOLATILE_ORGANICS
    assert parse_channel("h2s") == SensorChannel.HYDROGEN_SULFIDE
    assert parse_channel("temp") == SensorChannel.TEMPERATURE
    assert parse_channel(SensorChannel.ETHYLENE) is SensorChannel.ETHYLENE


def test_parse_channel_rejects_unknown_names() -> None:
    with pytest.raises(UnknownChannel, match="unknown sensor channel"):
        parse_channel("co2")


def test_bad_indicators_exclude_environment_channels() -> None:
    assert SensorChannel.TEMPERATURE not in BAD_INDICATOR_CHANNELS
    assert SensorChannel.HUMIDITY not in BAD_INDICATOR_CHANNELS
    assert SensorChannel.TURBIDITY in BAD_INDICATOR_CHANNELS
    assert len(BAD_INDICATOR_CHANNELS) == 6


def test_every_channel_has_display_metadata() -> None:
    assert set(CHANNEL_SPECS) == set(SensorChannel)


def test_gauge_percent_scales_against_one_and_a_half_display_max() -> None:
    # ammonia display_max is 50 -> full gauge at 75 ppm
    assert gauge_percent(SensorChannel.AMMONIA, 37.5) == pytest.approx(50.0)
    assert gauge_percent(SensorChannel.AMMONIA, 500.0) == 100.0
    assert gauge_percent(SensorChannel.AMMONIA, -3.0) == 0.0


def test_snapshot_from_baseline_matches_profile_channels() -> None:
    profile = get_profile("pasteurized-milk")
    snapshot = Snapshot.from_profile_baseline(profile)

    assert snapshot.profile_key == "pasteurized-milk"
    assert snapshot.channels == profile.channels
    assert snapshot.get(SensorChannel.TEMPERATURE) == 4.0
    assert snapshot.get(SensorChannel.TURBIDITY) == 5.0


def test_snapshot_for_profile_rejects_missing_and_extra_channels() -> None:
    profile = get_profile("eggs")
    values = dict(profile.baseline)
    values.pop(SensorChannel.AMMONIA)
    with pytest.raises(UnknownChannel, match="missing=\\['ammonia'\\]"):
        Snapshot.for_profile(profile, values)

    values = dict(profile.baseline)
    values[SensorChannel.TURBIDITY] = 1.0
    with pytest.raises(UnknownChannel, match="extra=\\['turbidity'\\]"):
        Snapshot.for_profile(profile, values)


def test_snapshot_values_are_read_only() -> None:
    snapshot = Snapshot(profile_key="fruit", values={SensorChannel.TEMPERATURE: 18.0})

    with pytest.raises(TypeError):
        snapshot.values[SensorChannel.TEMPERATURE] = 99.0  # type: ignore[index]


def test_snapshot_rejects_non_finite_and_string_keys() -> None:
    with pytest.raises(ValueError, match="finite"):
        Snapshot(profile_key="fruit", values={SensorChannel.TEMPERATURE: float("nan")})
    with pytest.raises(UnknownChannel):
        Snapshot(profile_key="fruit", values={"temp": 18.0})  # type: ignore[dict-item]
