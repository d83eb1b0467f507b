from __future__ import annotations

import streamlit as st

from e1sizing.config import configure_logging, load_settings
from e1sizing.erlangb import blocking_curve, erlang_b, offered_traffic_erlangs
from e1sizing.sizing import e1_trunks_for_channels, find_channels_for_blocking

# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Channel Calculator", layout="wide")
st.title("Channel Calculator")
st.caption("Minimum voice channels (and E1 trunks) that keep blocking at or below the target.")

try:
    settings = load_settings()
except RuntimeError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

configure_logging(settings)


# -----------------------------
# Sidebar controls
# -----------------------------
with st.sidebar:
    st.header("Traffic")
    source = st.radio("Traffic source", ["Users + call profile", "Erlangs"], index=0)

    if source == "Erlangs":
        traffic = st.number_input("Offered traffic (Erlangs)", min_value=0.0, value=15.0, step=0.5)
    else:
        users = st.number_input("Users", min_value=0, value=100, step=10)
        average_call_duration = st.number_input("Average call duration (minutes)", min_value=0.1, value=3.0, step=0.5)
        concurrent_calls = st.number_input("Concurrent calls", min_value=0, value=10, step=1)
        traffic = offered_traffic_erlangs(int(users), float(average_call_duration), int(concurrent_calls))

    st.divider()
    st.header("Target")
    blocking_target = st.slider("Blocking probability target", 0.001, 0.20, 0.01, 0.001, format="%.3f")
    channels_max = st.number_input(
        "Max channels to search",
        min_value=1,
        max_value=int(settings.channels_max),
        value=int(settings.channels_max),
        step=100,
    )


# -----------------------------
# Results
# -----------------------------
st.subheader("Results")

n = find_channels_for_blocking(float(traffic), float(blocking_target), int(channels_max))

c1, c2, c3, c4 = st.columns(4)
c1.metric("Offered traffic (Erlangs)", f"{traffic:.2f}")

if n is None:
    c2.metric("Required channels", "—")
    c3.metric("E1 trunks", "—")
    c4.metric("Achieved blocking", "—")
    st.error(f"No channel count up to {int(channels_max)} meets a blocking target of {blocking_target:.3f}.")
    st.stop()

c2.metric("Required channels", f"{n}")
c3.metric("E1 trunks", f"{e1_trunks_for_channels(n, settings.channels_per_trunk)}")
c4.metric("Achieved blocking", f"{erlang_b(float(traffic), n):.4%}")


# -----------------------------
# Blocking curve
# -----------------------------
st.subheader("Blocking curve")
curve_max = min(int(channels_max), max(2 * n, 10))
curve = blocking_curve(float(traffic), curve_max)
st.line_chart(curve, x="channels", y="blocking_probability")

with st.expander("Curve data", expanded=False):
    st.dataframe(curve, use_container_width=True)
