# src/e1sizing/table.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pandas as pd

from .config import load_settings
from .io import check_scenario_columns, normalize_scenario_df
from .sizing import SizingInputs, compute_required_channels, result_to_dict

logger = logging.getLogger(__name__)


# -----------------------------
# Validation
# -----------------------------
_EMPTY_RESULT: Dict[str, Any] = {
    "erlangs": None,
    "required_channels": None,
    "e1_trunks": None,
    "achieved_blocking": None,
}


def validate_scenario_df(df: pd.DataFrame) -> None:
    check_scenario_columns(df)

    if df.empty:
        raise ValueError("Scenario dataframe is empty")


# -----------------------------
# One row
# -----------------------------
def _size_row(
    *,
    users: int,
    average_call_duration: float,
    concurrent_calls: int,
    blocking_probability: float,
    channels_max: int,
    channels_per_trunk: int,
) -> Dict[str, Any]:
    inputs = SizingInputs(
        users=users,
        average_call_duration=average_call_duration,
        concurrent_calls=concurrent_calls,
        blocking_probability=blocking_probability,
        channels_max=channels_max,
        channels_per_trunk=channels_per_trunk,
    )
    try:
        res = compute_required_channels(inputs)
    except (ValueError, RuntimeError) as e:
        logger.warning("Scenario %s could not be sized: %s", inputs, e)
        return {**_EMPTY_RESULT, "error": str(e)}

    return {**result_to_dict(res), "error": None}


# -----------------------------
# Public API
# -----------------------------
def run_scenario_table(
    *,
    scenario_df: pd.DataFrame,
    channels_max: Optional[int] = None,
    channels_per_trunk: Optional[int] = None,
) -> pd.DataFrame:
    """
    Sizes every row of scenario_df and appends the result columns.
    Rows that fail validation or exhaust channels_max get empty results and
    an error message; the rest of the table is unaffected.
    """
    validate_scenario_df(scenario_df)

    if channels_max is None or channels_per_trunk is None:
        settings = load_settings()
        channels_max = settings.channels_max if channels_max is None else channels_max
        channels_per_trunk = settings.channels_per_trunk if channels_per_trunk is None else channels_per_trunk

    df = normalize_scenario_df(scenario_df)

    rows: list[Dict[str, Any]] = []
    for _, r in df.iterrows():
        rows.append(
            _size_row(
                users=int(r["users"]),
                average_call_duration=float(r["average_call_duration"]),
                concurrent_calls=int(r["concurrent_calls"]),
                blocking_probability=float(r["blocking_probability"]),
                channels_max=int(channels_max),
                channels_per_trunk=int(channels_per_trunk),
            )
        )

    out = pd.concat([df.reset_index(drop=True), pd.DataFrame(rows, columns=[*_EMPTY_RESULT, "error"])], axis=1)
    n_errors = int(out["error"].notna().sum())
    logger.info("Sized %d scenarios (%d with errors)", len(out), n_errors)
    return out


__all__ = [
    "validate_scenario_df",
    "run_scenario_table",
]
