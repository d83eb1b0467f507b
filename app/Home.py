import streamlit as st

from e1sizing.config import configure_logging, load_settings

st.set_page_config(page_title="E1 Trunk Sizing (Erlang-B)", layout="wide")

st.title("E1 Trunk Sizing (Erlang-B)")

try:
    settings = load_settings()
except RuntimeError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

configure_logging(settings)

st.write(
    """
This app computes **required voice channels and E1 trunks** using the Erlang-B (lost calls cleared) model.

Included:
- Channel Calculator (from Erlangs or from users / call duration / concurrency)
- Blocking curve for the chosen traffic
- Scenario Table (CSV upload, validation flags, batch sizing)
"""
)

st.info("Use the left sidebar to navigate to the calculator or the scenario table.")
