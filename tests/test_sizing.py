import math

import pytest

from e1sizing.erlangb import erlang_b
from e1sizing.sizing import (
    SizingInputs,
    compute_required_channels,
    e1_trunks_for_channels,
    find_channels_for_blocking,
    required_channels_from_usage,
    result_to_dict,
)


def test_find_channels_meets_target():
    n = find_channels_for_blocking(15.0, 0.05, 100)
    assert n is not None
    assert n >= 1
    assert erlang_b(15.0, n) <= 0.05
    # Erlang B table: 15 E at 5% GoS needs 20 channels
    assert n == 20


@pytest.mark.parametrize("traffic,target", [(2.0, 0.01), (15.0, 0.05), (50.0, 0.02), (120.0, 0.001)])
def test_find_channels_is_minimal(traffic, target):
    n = find_channels_for_blocking(traffic, target, 1000)
    assert n is not None
    assert erlang_b(traffic, n) <= target
    assert all(erlang_b(traffic, k) > target for k in range(1, n))


def test_low_traffic_lenient_target_needs_one_channel():
    assert find_channels_for_blocking(1.0, 0.5, 5) == 1


def test_exhausted_bound_returns_none():
    assert find_channels_for_blocking(50.0, 0.01, 10) is None
    assert find_channels_for_blocking(15.0, 0.0, 100) is None
    assert find_channels_for_blocking(15.0, 0.05, 0) is None


def test_bound_is_inclusive():
    n = find_channels_for_blocking(15.0, 0.05, 100)
    assert find_channels_for_blocking(15.0, 0.05, n) == n
    assert find_channels_for_blocking(15.0, 0.05, n - 1) is None


def test_result_stable_when_bound_grows():
    small = find_channels_for_blocking(30.0, 0.01, 100)
    assert small is not None
    assert find_channels_for_blocking(30.0, 0.01, 10_000) == small


def test_zero_traffic_needs_one_channel():
    assert find_channels_for_blocking(0.0, 0.01, 10) == 1


def test_required_channels_from_usage():
    n = required_channels_from_usage(100, 3.0, 10, 0.05)
    assert n is not None
    assert n == find_channels_for_blocking(50.0, 0.05, 10_000)
    assert erlang_b(50.0, n) <= 0.05
    assert erlang_b(50.0, n - 1) > 0.05


def test_required_channels_from_usage_exhausts_default_bound():
    # 20 000 Erlangs cannot fit in 10 000 channels at 1% blocking
    assert required_channels_from_usage(20_000, 60.0, 1, 0.01) is None


@pytest.mark.parametrize(
    "channels,per_trunk,expected",
    [(0, 30, 0), (1, 30, 1), (30, 30, 1), (31, 30, 2), (60, 30, 2), (25, 24, 2)],
)
def test_e1_trunks_for_channels(channels, per_trunk, expected):
    assert e1_trunks_for_channels(channels, per_trunk) == expected


def test_e1_trunks_rejects_nonpositive_trunk_size():
    with pytest.raises(ValueError):
        e1_trunks_for_channels(10, 0)


def _inputs(**overrides):
    base = dict(users=100, average_call_duration=3.0, concurrent_calls=10, blocking_probability=0.05)
    base.update(overrides)
    return SizingInputs(**base)


def test_compute_required_channels():
    res = compute_required_channels(_inputs())
    assert res.offered_traffic_erlangs == 50.0
    assert res.required_channels == required_channels_from_usage(100, 3.0, 10, 0.05)
    assert res.e1_trunks == math.ceil(res.required_channels / 30)
    assert res.achieved_blocking <= 0.05

    d = result_to_dict(res)
    assert d["required_channels"] == res.required_channels
    assert d["erlangs"] == 50.0


def test_no_users_returns_single_channel():
    res = compute_required_channels(_inputs(users=0))
    assert res.required_channels == 1
    assert res.e1_trunks == 1
    assert res.achieved_blocking == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"users": -1},
        {"average_call_duration": 0.0},
        {"concurrent_calls": -2},
        {"blocking_probability": 0.0},
        {"blocking_probability": 1.0},
        {"channels_max": 0},
        {"channels_per_trunk": 0},
    ],
)
def test_invalid_inputs_raise(overrides):
    with pytest.raises(ValueError):
        compute_required_channels(_inputs(**overrides))


def test_no_solution_within_bound_raises():
    with pytest.raises(RuntimeError):
        compute_required_channels(_inputs(users=1000, average_call_duration=60.0, concurrent_calls=1, channels_max=10))


def test_negative_traffic_needs_one_channel():
    assert find_channels_for_blocking(-1.0, 0.01, 10) == 1


def test_nan_traffic_finds_nothing():
    assert find_channels_for_blocking(float("nan"), 0.01, 10) is None
