"""
dashboard_ui.py — Reef Monitoring Dashboard
-------------------------------------------

Overview of every monitored reef and of recent activity:

✅ Reefs monitored, average health, species identified, uploads analysed
✅ Health band distribution chart
✅ Recent uploads from the history table (demo uploads on a fresh install)
✅ Latest alerts
✅ Sortable table of all monitored reefs

Dependencies:
- Streamlit for UI
- SQLAlchemy (core.ingest) for the upload history
- Plotly (core.charts) and pandas for charts and tables
"""

import logging

import pandas as pd
import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from core.charts import distribution_chart
from core.display import alert_color, alert_icon, format_date, format_time_ago, health_color, health_label, trend_icon
from core.ingest import recent_uploads
from core.reef_data import DEMO_ALERTS, DEMO_UPLOADS, REEF_LOCATIONS
from core.stats import average_health, health_distribution, total_species

logger = logging.getLogger(__name__)

st.title("📈 Dashboard")

# --- Upload History ---
try:
    uploads = recent_uploads(limit=8)
except SQLAlchemyError as e:
    logger.error("❌ Could not load upload history: %s", e)
    uploads = []

showing_demo_uploads = not uploads
if showing_demo_uploads:
    uploads = DEMO_UPLOADS

# --- Summary Stats ---
col1, col2, col3, col4 = st.columns(4)
col1.metric("🌊 Reefs Monitored", len(REEF_LOCATIONS))
col2.metric("📊 Avg Health Score", average_health(REEF_LOCATIONS))
col3.metric("🐠 Species Identified", total_species(REEF_LOCATIONS))
col4.metric("📹 Videos Analyzed", len(uploads))

# --- Distribution & Recent Uploads ---
left, right = st.columns(2)

with left, st.container(border=True):
    st.subheader("Reef Health Distribution")
    st.plotly_chart(distribution_chart(health_distribution(REEF_LOCATIONS)))

with right, st.container(border=True):
    st.subheader("Recent Uploads")
    if showing_demo_uploads:
        st.caption("Sample uploads shown until you analyse your own footage.")
    for upload in uploads:
        color = health_color(upload.health_score)
        st.markdown(
            f"📹 **{upload.filename}**<br>"
            f"<small>{upload.location} · {format_time_ago(upload.timestamp)}</small> "
            f"<span style='float:right;color:{color}'><b>{upload.health_score}</b> Health</span>",
            unsafe_allow_html=True,
        )

# --- Alerts ---
with st.container(border=True):
    a_col, link_col = st.columns([4, 1])
    a_col.subheader("Alerts")
    if link_col.button("View all →"):
        st.switch_page("app/alerts_ui.py")

    for alert in DEMO_ALERTS:
        st.markdown(
            f"<span style='color:{alert_color(alert.type)}'>{alert_icon(alert.type)}</span> "
            f"{alert.message}<br><small>{alert.location} • {format_time_ago(alert.timestamp)}</small>",
            unsafe_allow_html=True,
        )

# --- All Monitored Reefs ---
st.subheader("All Monitored Reefs")
reefs_df = pd.DataFrame([
    {
        "Reef Name": reef.name,
        "Region": reef.region,
        "Health Score": reef.health_score,
        "Status": health_label(reef.health_score),
        "Trend": f"{trend_icon(reef.trend)} {reef.trend.capitalize()}",
        "Last Updated": format_date(reef.last_updated),
    }
    for reef in REEF_LOCATIONS
])
st.dataframe(
    reefs_df,
    hide_index=True,
    column_config={
        "Health Score": st.column_config.ProgressColumn("Health Score", min_value=0, max_value=100, format="%d"),
    },
)
