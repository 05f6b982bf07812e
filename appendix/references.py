"""
references.py — ReefWatch References & Citations
------------------------------------------------

This Streamlit module provides attribution for the services, datasets and
open-source tools used by ReefWatch AI.

Includes:
- Google Gemini (reef health assessment)
- NOAA Coral Reef Watch (bleaching heat stress context)
- OpenStreetMap / CARTO (map tiles)
- OpenCV (video frame selection)

Dependencies:
- Streamlit for display
"""

import streamlit as st

st.title("📚 References")

# --- Gemini ---
st.write("### Google Gemini")
st.write("Reef photos and video frames are assessed with the Gemini API:")
st.code("- Google AI for Developers, Gemini API: https://ai.google.dev/gemini-api/docs")

# --- NOAA Coral Reef Watch ---
st.write("### Citing NOAA Coral Reef Watch")
st.write("The 27°C coral stress threshold and bleaching alerts follow NOAA Coral Reef Watch guidance:")
st.code(
"""NOAA Coral Reef Watch. 2018, updated daily. NOAA Coral Reef Watch Version 3.1 Daily
Global 5km Satellite Coral Bleaching Degree Heating Week Product.
College Park, Maryland, USA: NOAA Coral Reef Watch.
https://coralreefwatch.noaa.gov"""
)

# --- Map Tiles ---
st.write("### Map Data")
st.write("Map tiles © OpenStreetMap contributors, © CARTO.")
st.write("https://www.openstreetmap.org/copyright · https://carto.com/attributions")

# --- OpenCV Citation ---
st.write("### Citing OpenCV")
st.code(
"""@article{opencv_library,
  author={Bradski, G.},
  journal={Dr. Dobb's Journal of Software Tools},
  title={The OpenCV Library},
  year={2000}
}"""
)
