"""
db.py — Database Engine & Session Factory
-----------------------------------------

Creates the SQLAlchemy engine from DATABASE_URL (SQLite under MEDIA_ROOT by
default) and exposes SessionLocal for the rest of the app.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from config.settings import DATABASE_URL, MEDIA_ROOT
from db.upload_model import Base


def build_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        MEDIA_ROOT.mkdir(parents=True, exist_ok=True)
        # Streamlit serves each session on its own thread
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind=None):
    """Create any missing tables."""
    Base.metadata.create_all(bind=bind or engine)
