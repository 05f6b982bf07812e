"""
main.py — ReefWatch AI Entry Point
----------------------------------

Run with:

    streamlit run main.py

Sets the page configuration, logging and the upload-history database, then
routes every page through st.navigation. Pages are plain Streamlit scripts
under app/, appendix/ and tools/.
"""

import logging

import streamlit as st

from config.settings import ENVIRONMENT, configure_logging
from db.db import init_db

st.set_page_config(page_title="ReefWatch AI", page_icon="🪸", layout="wide")

configure_logging()
logger = logging.getLogger(__name__)


@st.cache_resource
def _init_storage():
    init_db()
    logger.info("🪸 ReefWatch started (%s)", ENVIRONMENT)
    return True


_init_storage()

# --- Page Registry ---
pages = {
    "ReefWatch": [
        st.Page("app/home_ui.py", title="Reef Map", icon="🗺️", default=True),
        st.Page("app/upload_ui.py", title="Upload", icon="📤"),
        st.Page("app/results_ui.py", title="Results", icon="📊"),
    ],
    "Monitoring": [
        st.Page("app/dashboard_ui.py", title="Dashboard", icon="📈"),
        st.Page("app/alerts_ui.py", title="Alerts", icon="🔔"),
        st.Page("app/historical_ui.py", title="Historical Data", icon="🕒"),
    ],
    "Appendix": [
        st.Page("appendix/project.py", title="About", icon="ℹ️"),
        st.Page("appendix/references.py", title="References", icon="📚"),
        st.Page("tools/reset.py", title="Maintenance", icon="🧹"),
    ],
}

st.navigation(pages).run()
