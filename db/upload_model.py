"""
upload_model.py — Upload History ORM Model
------------------------------------------

This module defines the SQLAlchemy ORM model for the analysed-upload history
shown on the ReefWatch dashboard.

Tables:
- `upload_record`: One row per analysed photo or video, with its health score

Dependencies:
- SQLAlchemy ORM
"""

from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class UploadRecordRow(Base):
    """
    Table: upload_record

    Stores one analysed upload:
    - Original filename and the reef location it was tagged with
    - Resulting health score
    - Status (processing, completed, failed) and analysis source (gemini, demo)
    """
    __tablename__ = "upload_record"

    upload_id = Column(Integer, primary_key=True)

    filename = Column(Text, nullable=False)
    location = Column(Text, nullable=False, default="Unspecified location")
    media_type = Column(Text)
    health_score = Column(Integer)
    status = Column(Text, nullable=False, default="completed")
    source = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
