from __future__ import annotations

import pandas as pd


REQUIRED_COLUMNS = ["users", "average_call_duration", "concurrent_calls", "blocking_probability"]
INTEGER_COLUMNS = ["users", "concurrent_calls"]


def check_scenario_columns(df: pd.DataFrame) -> None:
    """Required columns present, numeric, and whole numbers where counts are expected."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Required: {REQUIRED_COLUMNS}")

    for col in REQUIRED_COLUMNS:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.isna().any():
            raise ValueError(f"{col} contains non-numeric values.")
        if col in INTEGER_COLUMNS and (values != values.round()).any():
            bad = df.index[values != values.round()].tolist()[:10]
            raise ValueError(f"{col} must be whole numbers. Example bad rows: {bad}")


def normalize_scenario_df(df: pd.DataFrame) -> pd.DataFrame:
    """Returns a copy with counts as int and everything else as float."""
    check_scenario_columns(df)

    out = df.copy()
    for col in REQUIRED_COLUMNS:
        values = pd.to_numeric(out[col], errors="coerce")
        out[col] = values.astype(int) if col in INTEGER_COLUMNS else values.astype(float)
    return out


def read_scenario_csv(file) -> pd.DataFrame:
    """
    Reads the trunk-sizing scenario CSV.
    Expected columns:
      users (int)
      average_call_duration (float, minutes)
      concurrent_calls (int)
      blocking_probability (float, e.g. 0.01 for 1%)
    Optional:
      name (str)

    Returns a normalized DataFrame.
    """
    df = normalize_scenario_df(pd.read_csv(file))

    if "name" in df.columns:
        df["name"] = df["name"].astype(str).str.strip()

    return df.reset_index(drop=True)
