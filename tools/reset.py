"""
reset.py — Upload History & Staging Reset Utility
-------------------------------------------------

⚠️ USE WITH CAUTION ⚠️

This Streamlit module provides destructive maintenance options:

✅ Deletes all upload history records (schema is kept)
✅ Drops and recreates the upload history table
✅ Clears staged upload files under UPLOAD_DIR
✅ Clears the current analysis from the session

Requirements:
- SQLAlchemy for database access
- Streamlit UI
"""

import logging

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from config.settings import RESULT_STATE_KEY, UPLOAD_DIR
from core.ingest import clear_history, clear_staged_uploads
from db.db import engine, init_db
from db.upload_model import UploadRecordRow

logger = logging.getLogger(__name__)

st.title("🧹 Maintenance")
st.write("⚠️ Use caution: destructive operations ahead.")

col1, col2, col3, col4 = st.columns([1, 1, 1, 1])

# --- Button Controls ---
with col1:
    delete_clicked = st.button("🔥 Delete Upload History")
with col2:
    drop_clicked = st.button("💣 Rebuild History Table")
with col3:
    staged_clicked = st.button("🗂️ Clear Staged Uploads")
with col4:
    session_clicked = st.button("🗑️ Clear Current Result")


# --- Delete All Upload Records (Preserve Schema) ---
if delete_clicked:
    try:
        deleted = clear_history()
        st.success(f"✅ {deleted} upload record(s) deleted successfully.")
    except SQLAlchemyError as e:
        logger.error("❌ History delete failed: %s", e)
        st.error(f"❌ Could not delete upload history: {e}")


# --- Drop & Recreate Upload Table ---
if drop_clicked:
    try:
        UploadRecordRow.__table__.drop(bind=engine, checkfirst=True)
        init_db()
        logger.info("💣 Upload history table rebuilt")
        st.success("✅ Upload history table dropped and recreated.")
    except SQLAlchemyError as e:
        logger.error("❌ Table rebuild failed: %s", e)
        st.error(f"❌ Could not rebuild the upload table: {e}")


# --- Clear Staged Upload Files ---
if staged_clicked:
    if UPLOAD_DIR.exists():
        removed = clear_staged_uploads(UPLOAD_DIR)
        st.success(f"✅ {removed} staged file(s) removed from {UPLOAD_DIR}.")
    else:
        st.warning("⚠️ Upload staging path not found.")


# --- Clear Session Result ---
if session_clicked:
    if st.session_state.pop(RESULT_STATE_KEY, None) is not None:
        st.success("✅ Current analysis cleared.")
    else:
        st.warning("⚠️ No analysis in this session.")
