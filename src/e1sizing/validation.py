from __future__ import annotations

import pandas as pd

from .io import REQUIRED_COLUMNS


def validate_scenarios(df: pd.DataFrame) -> pd.DataFrame:
    """
    Returns a copy of df with one boolean flag column per input problem.
    Flags do not stop sizing; they explain why a row will fail or come back degenerate.
    """
    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(
            f"Scenario dataframe missing required columns: {sorted(missing)}. "
            f"Expected: {REQUIRED_COLUMNS}"
        )

    if df.empty:
        raise ValueError("Scenario dataframe is empty")

    out = df.copy()
    users = pd.to_numeric(out["users"], errors="coerce")
    duration = pd.to_numeric(out["average_call_duration"], errors="coerce")
    concurrent = pd.to_numeric(out["concurrent_calls"], errors="coerce")
    blocking = pd.to_numeric(out["blocking_probability"], errors="coerce")

    # NaN compares False, so unparsable values are caught by the range checks below
    out["flag_users_negative"] = ~(users >= 0)
    out["flag_duration_nonpositive"] = (users > 0) & ~(duration > 0)
    out["flag_concurrent_negative"] = ~(concurrent >= 0)
    out["flag_blocking_out_of_range"] = ~((blocking > 0) & (blocking < 1))
    out["flag_zero_traffic"] = (users * duration * concurrent) == 0

    return out
