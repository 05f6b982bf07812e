"""
historical_ui.py — Historical Reef Health Analysis
--------------------------------------------------

Tracks reef health changes over the last six months for a selected reef:

✅ Current score, 6-month average, peak, low and trend
✅ Health score, biodiversity and water temperature charts
✅ Key insights derived from the series

The monthly series is simulated from each reef's current state and is stable
for a given reef across reruns.

Dependencies:
- Streamlit for UI
- Plotly (core.charts) and pandas (core.stats)
"""

import streamlit as st

from core.charts import biodiversity_chart, historical_health_chart, temperature_chart
from core.demo import generate_historical_data
from core.display import health_color
from core.reef_data import REEF_LOCATIONS
from core.stats import historical_frame, historical_insights, historical_summary

st.title("🕒 Historical Data Analysis")
st.caption("Track reef health changes over time")

# --- Reef Selection ---
reef = st.selectbox(
    "Select Reef Location",
    REEF_LOCATIONS,
    format_func=lambda r: f"{r.name} ({r.region})",
)

points = generate_historical_data(reef)
summary = historical_summary(points)
frame = historical_frame(points)

# --- Summary Metrics ---
col1, col2, col3, col4, col5 = st.columns(5)
col1.metric("Current Score", reef.health_score)
col2.metric("6-Month Average", summary["average"])
col3.metric("Peak (6 mo)", summary["peak"])
col4.metric("Low (6 mo)", summary["low"])
col5.metric("Trend", f"{summary['trend']:+.0f}", delta=round(summary["trend"]))

st.markdown(
    f"<div style='height:6px;background:{health_color(reef.health_score)};border-radius:3px'></div>",
    unsafe_allow_html=True,
)

# --- Charts ---
st.plotly_chart(historical_health_chart(frame))

left, right = st.columns(2)
with left:
    st.plotly_chart(biodiversity_chart(frame))
with right:
    st.plotly_chart(temperature_chart(frame))

# --- Key Insights ---
st.subheader("Key Insights")
for col, insight in zip(st.columns(3), historical_insights(reef, points)):
    with col, st.container(border=True):
        st.markdown(f"### {insight['icon']}\n**{insight['title']}**")
        st.write(insight["text"])
