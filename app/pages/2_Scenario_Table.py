import io

import streamlit as st

from e1sizing.config import configure_logging, load_settings
from e1sizing.io import read_scenario_csv
from e1sizing.table import run_scenario_table
from e1sizing.validation import validate_scenarios

st.set_page_config(page_title="Scenario Table", layout="wide")
st.title("Scenario Table (CSV Upload)")

st.write(
    """
Upload one scenario per row:

`name` (optional), `users`, `average_call_duration` (minutes), `concurrent_calls`, `blocking_probability`

Each row is sized independently. Rows with invalid inputs are flagged and reported, not dropped.
"""
)

try:
    settings = load_settings()
except RuntimeError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

configure_logging(settings)

with st.sidebar:
    st.header("Search bound")
    channels_max = st.number_input(
        "Max channels per scenario",
        min_value=1,
        max_value=int(settings.channels_max),
        value=int(settings.channels_max),
        step=100,
    )
    channels_per_trunk = st.number_input(
        "Channels per trunk",
        min_value=1,
        value=int(settings.channels_per_trunk),
        step=1,
        help="30 for E1, 24 for T1.",
    )


uploaded = st.file_uploader("Upload scenario CSV", type=["csv"])

if uploaded is None:
    st.info("No file uploaded yet. Download a sample CSV below.")
    sample_path = "data/sample_scenarios.csv"
    with open(sample_path, "rb") as f:
        st.download_button("Download sample_scenarios.csv", data=f, file_name="sample_scenarios.csv", mime="text/csv")
    st.stop()

try:
    df = read_scenario_csv(uploaded)
    df_validated = validate_scenarios(df)
except ValueError as e:
    st.error(f"Could not read CSV: {e}")
    st.stop()

st.subheader("Input preview (first 30 rows)")
st.dataframe(df_validated.head(30), use_container_width=True)

# --------------------------
# Size every scenario
# --------------------------
out = run_scenario_table(
    scenario_df=df,
    channels_max=int(channels_max),
    channels_per_trunk=int(channels_per_trunk),
)

st.subheader("Results")
st.dataframe(out, use_container_width=True)

c1, c2, c3, c4 = st.columns(4)
c1.metric("Scenarios", f"{len(out)}")
c2.metric("Scenarios with errors", f"{int(out['error'].notna().sum())}")
c3.metric("Total channels (sum)", f"{out['required_channels'].fillna(0).sum():.0f}")
c4.metric("Total trunks (sum)", f"{out['e1_trunks'].fillna(0).sum():.0f}")

buf = io.StringIO()
out.to_csv(buf, index=False)
st.download_button(
    label="Download results CSV",
    data=buf.getvalue(),
    file_name="trunk_sizing_results.csv",
    mime="text/csv",
)
