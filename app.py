"""
GuessLab -- Streamlit Web Application

Interactive front end for the strategy comparison: pick the size of the
guess space, the number of trials and a seed, then compare how many guesses
each strategy needs on average. Charts are drawn with Plotly.
"""
import os
import sys

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from guesslab.comparator import (
    compare_strategies,
    compare_to_baseline,
    expected_guesses,
    select_winner,
    summary_frame,
    BASELINE_STRATEGY,
)
from guesslab.config import (
    DASHBOARD_MAX_WINNING_NUMBER,
    DEFAULT_MAX_WINNING_NUMBER,
    capped_simulations,
)
from guesslab.strategies import STRATEGIES, get_strategy

# -- Page Config ----------------------------------------------------------

st.set_page_config(
    page_title="GuessLab",
    page_icon="🎲",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -- Simulation (Cached) --------------------------------------------------

@st.cache_data(ttl=3600)
def get_comparison(names, max_winning_number, num_simulations, seed):
    strategies = [(name, get_strategy(name)) for name in names]
    records, samples = compare_strategies(strategies, max_winning_number, num_simulations,
                                          seed=seed, verbose=False, return_samples=True)
    return records, {name: np.array(counts) for name, counts in samples.items()}


# -- Sidebar --------------------------------------------------------------

st.sidebar.markdown("## GuessLab")

max_winning_number = st.sidebar.number_input(
    "Winning numbers (1..N)", min_value=1, max_value=DASHBOARD_MAX_WINNING_NUMBER,
    value=DEFAULT_MAX_WINNING_NUMBER, step=1,
)
num_simulations = st.sidebar.select_slider(
    "Simulations per strategy",
    options=[100, 1_000, 5_000, 10_000, 50_000, 100_000],
    value=10_000,
)
seed = st.sidebar.number_input("Seed", min_value=0, value=42, step=1)
selected = st.sidebar.multiselect(
    "Strategies",
    [name for name, _ in STRATEGIES],
    default=[name for name, _ in STRATEGIES],
)

st.sidebar.markdown("---")
st.sidebar.markdown(
    "**Note:** the winning number is redrawn after every guess, so every "
    "strategy is expected to need N guesses on average."
)

if not selected:
    st.warning("Select at least one strategy.")
    st.stop()

requested_simulations = int(num_simulations)
num_simulations = capped_simulations(int(max_winning_number), requested_simulations)
if num_simulations < requested_simulations:
    st.info(f"Simulations capped at {num_simulations:,} per strategy for N={int(max_winning_number)}.")


# -- Run ------------------------------------------------------------------

records, samples = get_comparison(tuple(selected), int(max_winning_number),
                                  int(num_simulations), int(seed))
frame = summary_frame(records, int(max_winning_number))
winner = select_winner(records)
expected = expected_guesses(int(max_winning_number))

st.title("Strategy Comparison")

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Winning Strategy", winner["name"])
with col2:
    st.metric("Best Average", f"{winner['stats']['average_guesses']:.2f}")
with col3:
    st.metric("Expected Average", f"{expected:g}")
with col4:
    st.metric("Trials per Strategy", f"{int(num_simulations):,}")

st.markdown("---")

# -- 1. Average guesses ---------------------------------------------------
st.subheader("Average Guesses to Win")

fig = go.Figure(go.Bar(
    x=frame["strategy"],
    y=frame["average_guesses"],
    error_y=dict(type="data", array=frame["standard_deviation"], visible=True),
    marker_color=["#2ECC71" if n == winner["name"] else "#3498DB" for n in frame["strategy"]],
    hovertemplate="%{x}<br>Average: %{y:.3f}<extra></extra>",
))
fig.add_hline(y=expected, line_dash="dash", line_color="#FFE66D",
              annotation_text="Expected (N)", annotation_position="top left")
fig.update_layout(
    xaxis_title="Strategy", yaxis_title="Guesses",
    template="plotly_dark", height=400,
)
st.plotly_chart(fig, use_container_width=True)

# -- 2. Quartile boxes ----------------------------------------------------
st.subheader("Guess Count Spread")

box = go.Figure()
for record in records:
    s = record["stats"]
    q = s["quartiles"]
    box.add_trace(go.Box(
        name=record["name"],
        q1=[q["q1"]], median=[q["q2"]], q3=[q["q3"]],
        lowerfence=[s["min_guesses"]], upperfence=[s["max_guesses"]],
        mean=[s["average_guesses"]], sd=[s["standard_deviation"]],
    ))
box.update_layout(yaxis_title="Guesses", template="plotly_dark",
                  height=450, showlegend=False)
st.plotly_chart(box, use_container_width=True)

# -- 3. Distribution of one strategy --------------------------------------
st.subheader("Guess Count Distribution")

focus = st.selectbox("Strategy", selected)
counts = samples[focus]
hist = px.histogram(
    pd.DataFrame({"Guesses": counts}), x="Guesses",
    template="plotly_dark", color_discrete_sequence=["#4ECDC4"],
)
hist.update_layout(yaxis_title="Trials", height=400)
st.plotly_chart(hist, use_container_width=True)

# -- 4. Tables ------------------------------------------------------------
st.subheader("Summary")
st.dataframe(frame.round(3), use_container_width=True, hide_index=True)

if BASELINE_STRATEGY in selected and len(selected) > 1:
    st.subheader(f"Significance vs {BASELINE_STRATEGY}")
    sig = compare_to_baseline(records, int(num_simulations))
    sig_df = pd.DataFrame([
        {"Strategy": name, **values} for name, values in sig.items()
    ])
    st.dataframe(sig_df, use_container_width=True, hide_index=True)
