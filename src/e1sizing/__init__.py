# src/e1sizing/__init__.py
from __future__ import annotations

# -----------------------------
# Erlang-B core
# -----------------------------
from .erlangb import (
    offered_traffic_erlangs,
    blocking_series,
    erlang_b,
    blocking_curve,
)

# -----------------------------
# Channel sizing
# -----------------------------
from .sizing import (
    DEFAULT_CHANNELS_MAX,
    CHANNELS_PER_E1,
    find_channels_for_blocking,
    required_channels_from_usage,
    e1_trunks_for_channels,
    SizingInputs,
    SizingResult,
    compute_required_channels,
    result_to_dict,
)

# -----------------------------
# Scenario tables
# -----------------------------
from .table import run_scenario_table, validate_scenario_df

from .config import Settings, load_settings, configure_logging

__all__ = [
    # Erlang-B
    "offered_traffic_erlangs",
    "blocking_series",
    "erlang_b",
    "blocking_curve",
    # Sizing
    "DEFAULT_CHANNELS_MAX",
    "CHANNELS_PER_E1",
    "find_channels_for_blocking",
    "required_channels_from_usage",
    "e1_trunks_for_channels",
    "SizingInputs",
    "SizingResult",
    "compute_required_channels",
    "result_to_dict",
    # Tables
    "run_scenario_table",
    "validate_scenario_df",
    # Config
    "Settings",
    "load_settings",
    "configure_logging",
]
