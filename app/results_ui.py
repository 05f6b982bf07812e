"""
results_ui.py — Reef Analysis Results
-------------------------------------

Shows the outcome of the most recent upload:

✅ Health gauge plus biodiversity, trend, fish count and confidence metrics
✅ Analysis summary and, for videos, the frame that was sent to the model
✅ Species breakdown table with a relative distribution bar
✅ Band-specific recommendations

Redirects to the Upload page when no analysis is in the session.

Dependencies:
- Streamlit for UI
- Plotly (core.charts) for the health gauge
- pandas (core.stats) for the species table
"""

import base64

import streamlit as st

from config.settings import FILENAME_STATE_KEY, RESULT_STATE_KEY
from core.charts import health_gauge, species_chart
from core.display import category_icon, format_date, recommendations, trend_color, trend_icon
from core.models import AnalysisResult
from core.stats import species_summary

# --- Load Result from Session ---
if RESULT_STATE_KEY not in st.session_state:
    st.switch_page("app/upload_ui.py")

result = AnalysisResult.from_dict(st.session_state[RESULT_STATE_KEY])
filename = st.session_state.get(FILENAME_STATE_KEY, "upload")

st.title("✅ Analysis Complete")
st.caption(f"{filename} · analysed {format_date(result.timestamp)}")

if result.is_demo:
    st.warning("🧪 Demo mode: these results are simulated and do not reflect the uploaded media.")

# --- Score Overview ---
gauge_col, metrics_col = st.columns([1, 2])

with gauge_col:
    st.plotly_chart(health_gauge(result.health_score))

with metrics_col:
    c1, c2 = st.columns(2)
    c1.metric("Biodiversity", result.biodiversity_score)
    c2.markdown(
        f"**Trend**<br><span style='font-size:1.8em;color:{trend_color(result.trend)}'>"
        f"{trend_icon(result.trend)} {result.trend.capitalize()}</span>",
        unsafe_allow_html=True,
    )
    c3, c4 = st.columns(2)
    if result.total_fish_count is not None:
        c3.metric("Total Fish", result.total_fish_count)
    if result.confidence is not None:
        c4.metric("Confidence", f"{result.confidence}%")

    st.subheader("Analysis Summary")
    st.write(result.summary)

# --- Analyzed Frame (videos only) ---
if result.analyzed_frame:
    st.subheader("🎞️ Analyzed Frame")
    _, encoded = result.analyzed_frame.split(",", 1)
    st.image(base64.b64decode(encoded), caption="This frame was selected as having the most fish visible")

# --- Species Breakdown ---
st.subheader("🐠 Species Breakdown")
summary = species_summary(result.species)

s1, s2, s3, s4 = st.columns(4)
s1.metric("Species", summary["species"])
s2.metric("Individuals", summary["individuals"])
s3.metric("Fish Types", summary["fish_types"])
s4.metric("Coral Types", summary["coral_types"])

rows = summary["rows"]
if rows.empty:
    st.info("No species were identified in this upload.")
else:
    rows = rows.assign(category=rows["category"].map(lambda c: f"{category_icon(c)} {c.capitalize()}"))
    st.dataframe(
        rows,
        hide_index=True,
        column_config={
            "species": "Species",
            "category": "Category",
            "count": st.column_config.NumberColumn("Count"),
            "distribution": st.column_config.ProgressColumn(
                "Distribution", min_value=0.0, max_value=1.0, format="%.2f",
            ),
        },
    )
    st.plotly_chart(species_chart(summary["rows"]))

# --- Recommendations ---
st.subheader("Recommendations")
for col, card in zip(st.columns(3), recommendations(result.health_score)):
    with col, st.container(border=True):
        st.markdown(f"### {card['icon']}\n**{card['title']}**")
        st.write(card["text"])

# --- Actions ---
a1, a2 = st.columns(2)
if a1.button("📤 Analyze Another"):
    del st.session_state[RESULT_STATE_KEY]
    st.switch_page("app/upload_ui.py")
if a2.button("📈 View Dashboard"):
    st.switch_page("app/dashboard_ui.py")
