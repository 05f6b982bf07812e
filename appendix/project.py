"""
project.py — ReefWatch AI Overview & Documentation
--------------------------------------------------

This Streamlit module presents an interactive overview of ReefWatch AI, the
coral reef health monitor. Expandable sections cover:

- Project goals and motivation
- System workflow from upload to results
- AI and computer vision components
- Demo mode and how fallbacks work
- User guide
- Current limitations and future plans

Dependencies:
- Streamlit for UI rendering
"""

import streamlit as st

from config.settings import GEMINI_MODEL, MAX_IMAGE_UPLOAD_MB, MAX_VIDEO_UPLOAD_MB

st.title("ℹ️ About ReefWatch AI")

# --- Project Overview Section ---
with st.expander("🔍 Project Overview", expanded=True):
    st.write("""
    ReefWatch AI turns underwater photos and video into a quick coral reef health assessment.
    Divers, researchers and citizen scientists upload footage and receive a health score,
    a biodiversity score, a trend and a breakdown of the species that were identified.

    - **Why This Project?**
      - Manual reef surveys are slow and need trained observers.
      - Coral bleaching and overfishing spread faster than surveys can track.
      - A shared, map-based view makes at-risk reefs visible at a glance.
    """)

# --- System Workflow Section ---
with st.expander("📊 System Workflow"):
    st.write(f"""
    1. **Upload:** A photo (up to {MAX_IMAGE_UPLOAD_MB:g}MB) or a video (up to {MAX_VIDEO_UPLOAD_MB:g}MB) is validated.
    2. **Frame Selection:** For videos, OpenCV samples frames and keeps the sharpest, most detailed one.
    3. **AI Analysis:** The media is sent to Google Gemini (`{GEMINI_MODEL}`) with a structured JSON prompt.
    4. **Scoring:** The reply is parsed, scores are clamped to 0-100 and species are categorised.
    5. **Results:** Health gauge, species table and recommendations are shown and the upload is logged.
    """)

# --- Data Science, AI, and Engineering Section ---
with st.expander("🤖 Data Science, AI, and Engineering"):
    st.write("""
    - **Generative AI:** Gemini identifies fish, coral and invertebrates and estimates reef health.
    - **Computer Vision:** Frame scoring combines sharpness (Laplacian variance), edge density and colour saturation.
    - **Data Visualisation:** Plotly charts and a folium map render scores by health band.
    - **Software Engineering:** Streamlit pages over small, tested modules, with SQLite upload history via SQLAlchemy.
    """)

# --- Demo Mode Section ---
with st.expander("🧪 Demo Mode"):
    st.write("""
    When no Gemini API key is configured, the file is too large, the network fails, or the AI reply
    cannot be parsed, ReefWatch generates a simulated result instead. Demo results are derived from
    the uploaded file's contents, so the same file always produces the same result. They are clearly
    labelled on the Results page.
    """)

# --- User Guide Section ---
with st.expander("📖 User Guide"):
    st.write("""
    1. Open **Upload** and choose the Photo or Video tab.
    2. Optionally tag the reef location, then click **Analyze Reef Health**.
    3. Review the health gauge, species breakdown and recommendations.
    4. Use **Dashboard**, **Alerts** and **Historical Data** to follow reefs over time.
    """)

# --- Current Limitations Section ---
with st.expander("⚠️ Current Limitations"):
    st.write("""
    - Health scores are model estimates, not field measurements.
    - Murky water and poor lighting reduce identification accuracy.
    - Only a single frame of each video is analysed.
    - Reef locations, alerts and historical series are built-in sample data.
    """)

# --- Future Plans Section ---
with st.expander("🚀 Future Plans"):
    st.write("""
    - Analyse several frames per video and aggregate species counts.
    - Pull live bleaching alerts from NOAA Coral Reef Watch.
    - Link uploads to reef locations on the map.
    """)
