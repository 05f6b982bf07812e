"""
upload_ui.py — Reef Media Upload & Analysis UI
----------------------------------------------

This Streamlit module accepts an underwater photo or video and runs it
through the reef health analysis:

✅ Photo and Video tabs with type-specific upload limits and tips
✅ Validation with user-facing error messages
✅ Optional reef location tag for the upload history
✅ Progress bar and status log fed by the analysis pipeline
✅ Hands the result to the Results page when analysis completes

Analysis Pipeline (core.analysis):
1. Gemini client check (missing key → demo mode)
2. Best-frame selection for videos (OpenCV)
3. Gemini assessment and JSON parsing
4. Any failure → deterministic demo analysis

Dependencies:
- Streamlit for UI
- core.ingest for validation, staging and history
- core.analysis for the Gemini / demo analysis
"""

import logging

import streamlit as st

from config.settings import (
    FILENAME_STATE_KEY,
    GEMINI_API_KEY,
    MAX_IMAGE_UPLOAD_MB,
    MAX_VIDEO_UPLOAD_MB,
    RESULT_STATE_KEY,
)
from core.analysis import analyze_reef_media
from core.exceptions import MediaValidationError
from core.ingest import record_upload, resolve_mime_type, staged_upload, validate_upload
from core.reef_data import REEF_LOCATIONS
from tools.gemini_utils import is_usable_key

logger = logging.getLogger(__name__)

UNSPECIFIED = "Other / unspecified"

PHOTO_TIPS = [
    "Use clear, well-lit underwater photos",
    "Include visible coral and fish in the frame",
    "Higher resolution images provide better analysis",
    "Avoid blurry or heavily filtered images",
]
VIDEO_TIPS = [
    "Use clear, well-lit underwater footage",
    "Include a variety of reef areas and species",
    "Steady camera movement helps identification",
    "Videos 10-60 seconds work best",
]

# Progress bar positions for the pipeline's status messages
PROGRESS_STEPS = {
    "Selecting": 25,
    "No frame": 40,
    "Sending": 50,
    "Parsing": 85,
}


st.title("📤 Analyze Reef Media")
st.write("Upload underwater photos or videos for AI-powered reef health analysis.")

if not is_usable_key(GEMINI_API_KEY):
    st.info("🧪 No Gemini API key configured: results are generated in demo mode.")


# --- Progress Log Helper Function ---
def make_progress_callback(progress_bar, progress_area):
    """
    Build a status callback that appends to the log and advances the progress bar.
    """
    st.session_state.progress_log = []

    def update_status(message):
        st.session_state.progress_log.append(message)
        percent = next((v for k, v in PROGRESS_STEPS.items() if message.startswith(k)), None)
        if percent is not None:
            progress_bar.progress(percent, text=message)
        progress_area.markdown(
            "<div style='max-height: 200px; overflow-y: auto; border: 1px solid #ddd; padding: 10px;'>"
            + "<br>".join(st.session_state.progress_log[-10:])
            + "</div>",
            unsafe_allow_html=True,
        )

    return update_status


def run_analysis(uploaded, media_type, location):
    data = uploaded.getvalue()
    mime_type = resolve_mime_type(uploaded.type, uploaded.name)

    progress_bar = st.progress(5, text="Preparing upload...")
    progress_area = st.empty()
    update_status = make_progress_callback(progress_bar, progress_area)

    if media_type == "video":
        with staged_upload(data, uploaded.name) as video_path:
            update_status(f"Staged {uploaded.name}")
            result = analyze_reef_media(
                data, uploaded.name, mime_type, media_type,
                progress=update_status, video_path=video_path,
            )
    else:
        result = analyze_reef_media(data, uploaded.name, mime_type, media_type, progress=update_status)
    progress_bar.progress(100, text="Analysis complete")

    record_upload(result, uploaded.name, location=location, media_type=media_type)

    st.session_state[RESULT_STATE_KEY] = result.to_dict()
    st.session_state[FILENAME_STATE_KEY] = uploaded.name
    logger.info("📊 %s analysed (%s), health %d", uploaded.name, result.source, result.health_score)
    st.switch_page("app/results_ui.py")


def render_upload_tab(media_type, accepted, limit_mb, tips):
    uploaded = st.file_uploader(
        f"Click to upload ({', '.join(ext.upper() for ext in accepted)}, up to {limit_mb:g}MB)",
        type=accepted,
        key=f"{media_type}_uploader",
    )

    with st.expander("💡 Tips for best results"):
        for tip in tips:
            st.write(f"- {tip}")

    if uploaded is None:
        return

    try:
        validate_upload(uploaded.name, uploaded.type, uploaded.size)
    except MediaValidationError as e:
        st.error(str(e))
        return

    if media_type == "image":
        st.image(uploaded, caption=uploaded.name)
    else:
        st.video(uploaded)
    st.caption(f"{uploaded.name} · {uploaded.size / (1024 * 1024):.1f}MB")

    location = st.selectbox(
        "Reef location (optional)",
        [UNSPECIFIED] + [reef.name for reef in REEF_LOCATIONS],
        key=f"{media_type}_location",
    )

    if st.button("🔬 Analyze Reef Health", type="primary", key=f"{media_type}_analyze"):
        run_analysis(uploaded, media_type, "" if location == UNSPECIFIED else location)


# --- Upload Tabs ---
photo_tab, video_tab = st.tabs(["🖼️ Photo", "🎬 Video"])

with photo_tab:
    render_upload_tab("image", ["jpg", "jpeg", "png", "webp", "gif"], MAX_IMAGE_UPLOAD_MB, PHOTO_TIPS)

with video_tab:
    render_upload_tab("video", ["mp4", "mov", "m4v", "webm"], MAX_VIDEO_UPLOAD_MB, VIDEO_TIPS)
