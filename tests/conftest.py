import os
import tempfile

# Settings are read at import time, so the environment is fixed before any project import
os.environ["MEDIA_ROOT"] = tempfile.mkdtemp(prefix="reefwatch-tests-")
os.environ["DEMO_DELAY_SECONDS"] = "0"
os.environ["GEMINI_API_KEY"] = ""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.db import init_db


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def session_factory():
    engine = _memory_engine()
    init_db(bind=engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def broken_session_factory():
    """Session factory over a database with no tables."""
    engine = _memory_engine()
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()
