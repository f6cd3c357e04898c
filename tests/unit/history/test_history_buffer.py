"""Tests for rolling per-channel history."""

from __future__ import annotations

import pytest

from freshsense.config import MonitorConfig
from freshsense.domain import SensorChannel
from freshsense.errors import UnknownChannel
from freshsense.history import HistoryBuffer
from freshsense.profiles import default_registry, get_profile
from freshsense.simulation import make_rng


class _ConstantRandom:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def test_reset_fills_every_channel_to_capacity_ending_at_baseline() -> None:
    history = HistoryBuffer(make_rng(7), MonitorConfig(history_capacity=12))

    for profile in default_registry():
        history.reset(profile)
        assert set(history.channels()) == set(profile.baseline)
        for channel, baseline in profile.baseline.items():
            series = history.series(channel)
            assert len(series) == 12
            assert series[-1] == baseline
            assert all(value >= 0.0 for value in series)
            assert history.live_count(channel) == 0


def test_fresh_seed_points_follow_noise_formula_and_floor_at_zero() -> None:
    history = HistoryBuffer(_ConstantRandom(0.0), MonitorConfig(history_capacity=4))
    history.reset(get_profile("fruit"))

    # draw 0.0 < 0.7 -> fresh, noise = -0.5 * max(baseline * 0.1, 2)
    assert history.series(SensorChannel.TEMPERATURE) == (17.0, 17.0, 17.0, 18.0)
    assert history.series(SensorChannel.VOLATILE_ORGANICS) == (95.0, 95.0, 95.0, 100.0)
    assert history.series(SensorChannel.AMMONIA) == (0.0, 0.0, 0.0, 0.0)


def test_stale_seed_points_climb_toward_threshold_ceiling() -> None:
    history = HistoryBuffer(_ConstantRandom(0.9), MonitorConfig(history_capacity=3))
    history.reset(get_profile("fruit"))

    # 18 + 0.9 * 0.5 * (30 - 18)
    assert history.series(SensorChannel.TEMPERATURE) == (23.4, 23.4, 18.0)
    # no threshold: ceiling is 1.5 * 85
    assert history.series(SensorChannel.HUMIDITY) == (104.1, 104.1, 85.0)


def test_push_keeps_length_and_appends_newest_last() -> None:
    history = HistoryBuffer(make_rng(1), MonitorConfig(history_capacity=10))
    history.reset(get_profile("raw-meat"))

    for step in range(25):
        history.push(SensorChannel.AMMONIA, float(step))
        series = history.series(SensorChannel.AMMONIA)
        assert len(series) == 10
        assert series[-1] == float(step)

    assert history.series(SensorChannel.AMMONIA) == tuple(float(v) for v in range(15, 25))


def test_live_count_separates_seeded_and_pushed_points() -> None:
    history = HistoryBuffer(make_rng(1), MonitorConfig(history_capacity=5))
    history.reset(get_profile("eggs"))

    history.push(SensorChannel.TEMPERATURE, 11.0)
    history.push(SensorChannel.TEMPERATURE, 12.0)
    assert history.live_count(SensorChannel.TEMPERATURE) == 2
    assert history.live_count(SensorChannel.AMMONIA) == 0

    for _ in range(10):
        history.push(SensorChannel.TEMPERATURE, 13.0)
    assert history.live_count(SensorChannel.TEMPERATURE) == 5

    history.reset(get_profile("eggs"))
    assert history.live_count(SensorChannel.TEMPERATURE) == 0
    assert history.series(SensorChannel.TEMPERATURE)[-1] == 10.0


def test_reset_replaces_channel_set_on_profile_switch() -> None:
    history = HistoryBuffer(make_rng(2))
    history.reset(get_profile("pasteurized-milk"))
    assert SensorChannel.TURBIDITY in history.channels()

    history.reset(get_profile("fruit"))
    assert SensorChannel.TURBIDITY not in history.channels()
    with pytest.raises(UnknownChannel):
        history.push(SensorChannel.TURBIDITY, 3.0)


def test_untracked_channel_lookups_raise() -> None:
    history = HistoryBuffer(make_rng(2))

    with pytest.raises(UnknownChannel, match="does not track"):
        history.series(SensorChannel.TEMPERATURE)
    with pytest.raises(UnknownChannel):
        history.live_count(SensorChannel.TEMPERATURE)


def test_capacity_comes_from_config() -> None:
    assert HistoryBuffer(make_rng(0)).capacity == 10
    assert HistoryBuffer(make_rng(0), MonitorConfig(history_capacity=12)).capacity == 12
