# src/e1sizing/sizing.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import islice
from typing import Any, Dict, Optional

from .erlangb import blocking_series, erlang_b, offered_traffic_erlangs

logger = logging.getLogger(__name__)

DEFAULT_CHANNELS_MAX: int = 10_000
CHANNELS_PER_E1: int = 30


# -----------------------------
# Core search (never raises)
# -----------------------------
def find_channels_for_blocking(
    traffic: float,
    blocking_probability: float,
    channels_max: int,
) -> Optional[int]:
    """
    Smallest n in [1, channels_max] with erlang_b(traffic, n) <= blocking_probability,
    or None when no channel count within the bound meets the target.

    Blocking is non-increasing in n, so the first hit is the minimum.
    The scan walks the recurrence once: the value tested at step n is
    exactly erlang_b(traffic, n).
    """
    if channels_max < 1:
        return None

    for n, b in islice(blocking_series(traffic), int(channels_max)):
        if b <= blocking_probability:
            logger.debug("traffic=%.4f target=%g -> %d channels (B=%.6g)", traffic, blocking_probability, n, b)
            return n

    logger.debug("traffic=%.4f target=%g -> no solution up to %d channels", traffic, blocking_probability, channels_max)
    return None


def required_channels_from_usage(
    users: int,
    average_call_duration: float,
    concurrent_calls: int,
    blocking_probability: float,
) -> Optional[int]:
    """Usage (users, minutes per call, simultaneous calls) -> traffic -> channel search."""
    traffic = offered_traffic_erlangs(users, average_call_duration, concurrent_calls)
    return find_channels_for_blocking(traffic, blocking_probability, DEFAULT_CHANNELS_MAX)


def e1_trunks_for_channels(channels: int, channels_per_trunk: int = CHANNELS_PER_E1) -> int:
    # An E1 carries 30 voice channels (32 timeslots minus framing and signalling).
    if channels_per_trunk <= 0:
        raise ValueError("channels_per_trunk must be > 0")
    if channels <= 0:
        return 0
    return int(math.ceil(channels / channels_per_trunk))


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class SizingInputs:
    users: int
    average_call_duration: float  # minutes
    concurrent_calls: int

    # Target definition
    blocking_probability: float

    # Search bound
    channels_max: int = DEFAULT_CHANNELS_MAX
    channels_per_trunk: int = CHANNELS_PER_E1


@dataclass(frozen=True)
class SizingResult:
    offered_traffic_erlangs: float
    required_channels: int
    e1_trunks: int
    achieved_blocking: float


# -----------------------------
# Internal helpers
# -----------------------------
def _validate_inputs(inputs: SizingInputs) -> None:
    if inputs.users < 0:
        raise ValueError("users must be >= 0")

    if inputs.users > 0 and inputs.average_call_duration <= 0:
        raise ValueError("average_call_duration must be > 0 when users > 0")

    if inputs.concurrent_calls < 0:
        raise ValueError("concurrent_calls must be >= 0")

    if not (0.0 < inputs.blocking_probability < 1.0):
        raise ValueError("blocking_probability must be between 0 and 1 (exclusive)")

    if inputs.channels_max < 1:
        raise ValueError("channels_max must be >= 1")

    if inputs.channels_per_trunk < 1:
        raise ValueError("channels_per_trunk must be >= 1")


# -----------------------------
# Public API
# -----------------------------
def compute_required_channels(inputs: SizingInputs) -> SizingResult:
    """
    Validated sizing for one scenario.

    Raises ValueError for physically meaningless inputs and RuntimeError
    when no channel count up to channels_max meets the blocking target.
    """
    _validate_inputs(inputs)

    a = offered_traffic_erlangs(inputs.users, inputs.average_call_duration, inputs.concurrent_calls)

    # No offered load => a single channel, nothing blocked (stable behavior)
    if a <= 0:
        return SizingResult(
            offered_traffic_erlangs=0.0,
            required_channels=1,
            e1_trunks=e1_trunks_for_channels(1, inputs.channels_per_trunk),
            achieved_blocking=0.0,
        )

    n = find_channels_for_blocking(a, inputs.blocking_probability, inputs.channels_max)
    if n is None:
        raise RuntimeError(
            f"Could not meet blocking_probability={inputs.blocking_probability} "
            f"for {a:.2f} Erlangs up to channels_max={inputs.channels_max}"
        )

    return SizingResult(
        offered_traffic_erlangs=float(a),
        required_channels=n,
        e1_trunks=e1_trunks_for_channels(n, inputs.channels_per_trunk),
        achieved_blocking=erlang_b(a, n),
    )


def result_to_dict(result: SizingResult) -> Dict[str, Any]:
    return {
        "erlangs": result.offered_traffic_erlangs,
        "required_channels": result.required_channels,
        "e1_trunks": result.e1_trunks,
        "achieved_blocking": result.achieved_blocking,
    }


__all__ = [
    "DEFAULT_CHANNELS_MAX",
    "CHANNELS_PER_E1",
    "find_channels_for_blocking",
    "required_channels_from_usage",
    "e1_trunks_for_channels",
    "SizingInputs",
    "SizingResult",
    "compute_required_channels",
    "result_to_dict",
]
