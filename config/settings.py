"""
settings.py - Central configuration for ReefWatch AI

All file system paths are derived from MEDIA_ROOT to ensure consistent structure.
Secrets (API keys) reside in secrets.toml for Streamlit, with .env as a fallback.
"""

import logging
import os
from dotenv import load_dotenv
from pathlib import Path


# --- Load .env ---

load_dotenv()


# --- Helper Functions ---

def normalize_root(env_var: str, default: str) -> Path:
    """
    Resolve a filesystem path from an environment variable, falling back to a default.
    """
    raw = os.getenv(env_var, default)
    if not (raw.startswith(os.sep) or raw.startswith('.') or raw.startswith('~')):
        raw = os.sep + raw
    return Path(raw).expanduser().resolve()


# --- Core Paths ---

MEDIA_ROOT = normalize_root('MEDIA_ROOT', './media')

# Derived structure based on MEDIA_ROOT
UPLOAD_DIR = MEDIA_ROOT / "uploads"

# --- Database & Environment ---

DATABASE_URL = os.getenv('DATABASE_URL', f"sqlite:///{MEDIA_ROOT / 'reefwatch.db'}")
DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')
ENVIRONMENT = os.getenv('ENV', 'development')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# --- Analysis Limits ---

# Largest payload sent to the model; anything bigger is analysed in demo mode
MAX_IMAGE_SIZE_MB = float(os.getenv('MAX_IMAGE_SIZE_MB', 20))
MAX_VIDEO_SIZE_MB = float(os.getenv('MAX_VIDEO_SIZE_MB', 20))

# Largest file accepted by the upload form
MAX_IMAGE_UPLOAD_MB = float(os.getenv('MAX_IMAGE_UPLOAD_MB', 20))
MAX_VIDEO_UPLOAD_MB = float(os.getenv('MAX_VIDEO_UPLOAD_MB', 50))

DEMO_DELAY_SECONDS = float(os.getenv('DEMO_DELAY_SECONDS', 2.5))
FRAME_SAMPLE_COUNT = int(os.getenv('FRAME_SAMPLE_COUNT', 12))

# --- Gemini API Config ---
GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-1.5-flash')
GEMINI_PLACEHOLDER_KEY = 'your_gemini_api_key_here'

# --- Secrets ---

def read_secret(name: str, default=None):
    """
    Look up a secret in Streamlit's secrets.toml, then the environment.
    """
    try:
        import streamlit as st
        from streamlit.errors import StreamlitAPIException
    except ImportError:
        return os.getenv(name, default)

    try:
        value = st.secrets.get(name)
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml on this machine
        value = None
    return value if value is not None else os.getenv(name, default)


GEMINI_API_KEY = read_secret("GEMINI_API_KEY")


# --- Logging ---

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Attach a single stream handler to the root logger.
    Streamlit re-executes the entry script on every interaction, so repeated calls are no-ops.
    """
    root = logging.getLogger()
    if any(getattr(h, "_reefwatch", False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._reefwatch = True
    root.addHandler(handler)
    root.setLevel(level)


# --- Session State Keys ---
# Shared between the upload and results pages
RESULT_STATE_KEY = "analysis_result"
FILENAME_STATE_KEY = "analysis_filename"
