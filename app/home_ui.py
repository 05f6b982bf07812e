"""
home_ui.py — Global Coral Reef Health Monitor
---------------------------------------------

Landing page of ReefWatch AI. It provides:

✅ Headline statistics across all monitored reefs
✅ Interactive folium world map with health-colored reef markers
✅ Detail panel for the selected reef (scores, trend, top species)
✅ "How It Works" overview of the upload → analysis → results flow
✅ Live reef camera stations with their latest health readings

Dependencies:
- Streamlit for UI
- folium + streamlit-folium for the clickable reef map
- core.reef_data / core.stats / core.display for data and formatting
"""

import streamlit as st
from streamlit_folium import st_folium

from core.display import format_date, health_color, health_label, trend_icon
from core.reef_data import LIVE_CAMERAS, REEF_LOCATIONS
from core.reef_map import build_reef_map, reef_at
from core.stats import average_health, health_distribution

ALL_REEFS = "🌍 All reefs"
SELECTED_KEY = "selected_reef"
LAST_CLICK_KEY = "reef_map_last_click"

st.title("🪸 Global Coral Reef Health Monitor")
st.caption("AI-powered reef health scoring from underwater photos and video.")

# --- Headline Stats ---
distribution = health_distribution(REEF_LOCATIONS)
col1, col2, col3, col4, col5 = st.columns(5)
col1.metric("Reefs Monitored", len(REEF_LOCATIONS))
col2.metric("Avg Health Score", average_health(REEF_LOCATIONS))
col3.metric("🟢 Healthy", distribution["healthy"])
col4.metric("🟡 At Risk", distribution["at_risk"])
col5.metric("🔴 Critical", distribution["critical"])

# --- Reef Selection ---
# Selectbox and marker clicks share one selection; sync the widget before it is drawn
reef_names = {reef.name: reef for reef in REEF_LOCATIONS}
st.session_state.setdefault(SELECTED_KEY, ALL_REEFS)
st.session_state["reef_choice"] = st.session_state[SELECTED_KEY]


def _on_reef_choice():
    st.session_state[SELECTED_KEY] = st.session_state["reef_choice"]


st.selectbox("Focus on a reef", [ALL_REEFS] + list(reef_names), key="reef_choice", on_change=_on_reef_choice)
selected = reef_names.get(st.session_state[SELECTED_KEY])

# --- Map & Detail Panel ---
map_col, detail_col = st.columns([3, 1]) if selected else (st.container(), None)

with map_col:
    reef_map = build_reef_map(REEF_LOCATIONS, selected=selected)
    map_state = st_folium(reef_map, use_container_width=True, height=520,
                          returned_objects=["last_object_clicked"], key="reef_map")
    st.caption("🟢 Healthy (75+)  ·  🟡 At Risk (50-74)  ·  🔴 Critical (<50)")

# Only act on new clicks; the component keeps returning the last one
clicked = (map_state or {}).get("last_object_clicked")
if clicked and clicked != st.session_state.get(LAST_CLICK_KEY):
    st.session_state[LAST_CLICK_KEY] = clicked
    clicked_reef = reef_at(REEF_LOCATIONS, clicked)
    if clicked_reef is not None and clicked_reef is not selected:
        st.session_state[SELECTED_KEY] = clicked_reef.name
        st.rerun()

if selected:
    with detail_col, st.container(border=True):
        color = health_color(selected.health_score)
        st.subheader(selected.name)
        st.caption(selected.region)
        st.markdown(
            f"<h1 style='color:{color};margin:0'>{selected.health_score}</h1>"
            f"<span style='color:{color}'>{health_label(selected.health_score)}</span>",
            unsafe_allow_html=True,
        )
        st.metric("Biodiversity Score", selected.biodiversity_score)
        st.metric("Trend", f"{trend_icon(selected.trend)} {selected.trend.capitalize()}")
        st.metric("Species Identified", len(selected.species))

        st.markdown("**Top Species**")
        for species in sorted(selected.species, key=lambda s: s.count, reverse=True)[:3]:
            st.write(f"- {species.name}: {species.count}")
        st.caption(f"Last updated {format_date(selected.last_updated)}")

# --- How It Works ---
st.header("How It Works")
steps = [
    ("📹", "Upload Video", "Upload underwater reef footage in MP4 or MOV format, or a photo, for AI analysis."),
    ("🤖", "AI Analysis", "Our AI identifies fish species, counts populations, and assesses reef health indicators."),
    ("📊", "Get Results", "Receive detailed health scores, species breakdowns, and trend analysis."),
    ("🌍", "Global Impact", "Contribute to worldwide reef monitoring and conservation efforts."),
]
for col, (icon, title, text) in zip(st.columns(4), steps):
    with col, st.container(border=True):
        st.markdown(f"### {icon}\n**{title}**")
        st.write(text)

if st.button("📤 Upload Footage", type="primary"):
    st.switch_page("app/upload_ui.py")

# --- Live Reef Cameras ---
st.header("🔴 Live Reef Cameras")
for col, camera in zip(st.columns(len(LIVE_CAMERAS)), LIVE_CAMERAS):
    with col, st.container(border=True):
        st.markdown(f"**{camera['camera_id']} · {camera['station']}**")
        st.caption(f"DEPTH: {camera['depth']} · TEMP: {camera['temperature']}")
        st.video(f"https://www.youtube.com/watch?v={camera['video_id']}")
        st.markdown(f"📍 {camera['location']}  \n🪸 {camera['species']}")

        score = camera["health_score"]
        st.markdown(
            f"Health Score: <b style='color:{health_color(score)}'>{score}</b> ({health_label(score)})",
            unsafe_allow_html=True,
        )
        st.progress(score / 100)

        c1, c2, c3 = st.columns(3)
        c1.metric("Population", camera["population"])
        c2.metric("Growth Rate", camera["growth_rate"])
        c3.metric("Fish Activity", camera["fish_activity"])
        st.caption(f"24h Trend: {camera['trend_note']}")
