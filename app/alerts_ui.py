"""
alerts_ui.py — Reef Alert System
--------------------------------

Real-time style monitoring alerts for reef ecosystems worldwide:

✅ Counts of critical, warning, active and total alerts
✅ Type and status filters ("all" matches everything)
✅ Expandable alert cards with location, coordinates and incident details

Dependencies:
- Streamlit for UI
- core.stats for filtering and counts
"""

import streamlit as st

from core.display import alert_color, alert_icon, format_time_ago, status_label
from core.models import ALERT_STATUSES, ALERT_TYPES
from core.reef_data import ALERT_DETAILS
from core.stats import alert_counts, filter_alerts

STATUS_BADGES = {"active": "🔴", "monitoring": "🟡", "resolved": "✅"}

st.title("🔔 Alert System")
st.caption("Real-time monitoring alerts for reef ecosystems worldwide")

# --- Alert Counts ---
counts = alert_counts(ALERT_DETAILS)
col1, col2, col3, col4 = st.columns(4)
col1.metric("🚨 Critical", counts["critical"])
col2.metric("⚠️ Warnings", counts["warning"])
col3.metric("🔴 Active", counts["active"])
col4.metric("📋 Total Alerts", counts["total"])

# --- Filters ---
f1, f2 = st.columns(2)
alert_type = f1.selectbox(
    "Type", ("all",) + ALERT_TYPES,
    format_func=lambda t: "All Types" if t == "all" else t.capitalize(),
)
status = f2.selectbox(
    "Status", ("all",) + ALERT_STATUSES,
    format_func=lambda s: "All Status" if s == "all" else status_label(s),
)

# --- Alert Cards ---
alerts = filter_alerts(ALERT_DETAILS, alert_type=alert_type, status=status)

if not alerts:
    st.info("✓ No alerts match your current filters")

for alert in alerts:
    with st.container(border=True):
        head, badge = st.columns([5, 1])
        head.markdown(
            f"<span style='color:{alert_color(alert.type)};font-size:1.2em'>{alert_icon(alert.type)}</span> "
            f"**{alert.title}**",
            unsafe_allow_html=True,
        )
        badge.markdown(f"{STATUS_BADGES.get(alert.status, '')} {status_label(alert.status)}")

        st.write(alert.message)
        st.caption(f"📍 {alert.location} · {alert.coordinates} · {format_time_ago(alert.timestamp, verbose=True)}")

        with st.expander("Details"):
            for line in alert.details:
                st.write(f"- {line}")
