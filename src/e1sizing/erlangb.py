from __future__ import annotations

from itertools import islice
from typing import Iterator, Tuple

import numpy as np
import pandas as pd


def offered_traffic_erlangs(users: float, average_call_duration: float, concurrent_calls: float) -> float:
    """
    Offered traffic A (Erlangs) from busy-hour usage.

    average_call_duration is in minutes, so the minute-based load is
    normalised to the hour:
      A = users * average_call_duration * concurrent_calls / 60

    No validation: nonsensical inputs come back as nonsensical traffic.
    """
    return float(users) * float(average_call_duration) * float(concurrent_calls) / 60.0


def blocking_series(traffic: float) -> Iterator[Tuple[int, float]]:
    """
    Yields (n, B(A, n)) for n = 1, 2, ... without end.

    Uses the inverse recurrence instead of A^n / n!:
      inv(0) = 1
      inv(n) = 1 + inv(n-1) * (n / A)
      B(A, n) = 1 / inv(n)

    Every intermediate stays bounded (it only grows towards inf, never
    overflows into an exception), so channel counts in the thousands are fine.
    """
    a = float(traffic)
    n = 0

    # No offered load => nothing is ever blocked.
    if a <= 0:
        while True:
            n += 1
            yield n, 0.0

    inv = 1.0
    while True:
        n += 1
        inv = 1.0 + inv * (n / a)
        yield n, 1.0 / inv


def erlang_b(traffic: float, channels: int) -> float:
    """
    Erlang B blocking probability (blocked calls cleared, no queue).

    channels <= 0 -> 1.0 (every call is blocked).
    traffic <= 0 with channels >= 1 -> 0.0.
    """
    if channels <= 0:
        return 1.0

    b = 1.0
    for _, b in islice(blocking_series(traffic), int(channels)):
        pass
    return float(b)


def blocking_curve(traffic: float, channels_max: int) -> pd.DataFrame:
    """Blocking probability for channels = 0..channels_max."""
    if channels_max < 0:
        raise ValueError("channels_max must be >= 0")

    channels = np.arange(0, int(channels_max) + 1, dtype=int)
    blocking = np.empty(len(channels), dtype=float)
    blocking[0] = 1.0
    for n, b in islice(blocking_series(traffic), int(channels_max)):
        blocking[n] = b

    return pd.DataFrame({"channels": channels, "blocking_probability": blocking})


__all__ = [
    "offered_traffic_erlangs",
    "blocking_series",
    "erlang_b",
    "blocking_curve",
]
