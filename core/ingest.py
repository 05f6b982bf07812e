"""
ingest.py — Upload Validation, Staging and History
--------------------------------------------------

This module handles everything that happens to an uploaded file around the
AI analysis itself:

- Detects whether an upload is a photo or a video
- Validates MIME type and size against the upload limits
- Stages the bytes under UPLOAD_DIR so OpenCV can read videos from disk,
  removing the staged copy once the analysis is done
- Records each analysed upload in the history table for the dashboard
- Clears staged files and history on request

Limits:
- Photos: JPG, PNG, WebP, GIF up to MAX_IMAGE_UPLOAD_MB (20MB)
- Videos: MP4, MOV, M4V, WebM up to MAX_VIDEO_UPLOAD_MB (50MB)

Dependencies:
- SQLAlchemy for the upload history
"""

import logging
import re
import shutil
import uuid
from contextlib import contextmanager
from datetime import timezone
from pathlib import Path
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from config.settings import MAX_IMAGE_UPLOAD_MB, MAX_VIDEO_UPLOAD_MB, UPLOAD_DIR
from core.exceptions import MediaValidationError
from core.models import UPLOAD_STATUSES, AnalysisResult, UploadRecord
from db.db import SessionLocal
from db.upload_model import UploadRecordRow

logger = logging.getLogger(__name__)


IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}
VIDEO_TYPES = {"video/mp4", "video/quicktime", "video/x-m4v", "video/webm"}

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}
VIDEO_EXTENSIONS = {".mp4", ".mov", ".m4v", ".webm"}

EXTENSION_MIME = {
    ".jpg": "image/jpeg", ".jpeg": "image/jpeg", ".png": "image/png",
    ".webp": "image/webp", ".gif": "image/gif",
    ".mp4": "video/mp4", ".mov": "video/quicktime",
    ".m4v": "video/x-m4v", ".webm": "video/webm",
}


def detect_media_type(mime_type: Optional[str], filename: str) -> str:
    """
    Classify an upload as "image" or "video" from its MIME type, falling back to the extension.
    """
    mime_type = (mime_type or "").lower()
    if mime_type.startswith("image/"):
        return "image"
    if mime_type.startswith("video/"):
        return "video"

    suffix = Path(filename).suffix.lower()
    if suffix in IMAGE_EXTENSIONS:
        return "image"
    if suffix in VIDEO_EXTENSIONS:
        return "video"
    raise MediaValidationError("Please upload a photo (JPG, PNG, WebP, GIF) or a video (MP4, MOV, WebM)")


def resolve_mime_type(mime_type: Optional[str], filename: str) -> str:
    """Browsers sometimes send an empty or generic type; use the extension instead."""
    if mime_type and mime_type != "application/octet-stream":
        return mime_type.lower()
    return EXTENSION_MIME.get(Path(filename).suffix.lower(), "")


def validate_upload(filename: str, mime_type: Optional[str], size: int) -> str:
    """
    Check an upload against the accepted types and size limits.

    Returns:
        str: "image" or "video"

    Raises:
        MediaValidationError: With a message suitable for showing to the user
    """
    mime_type = resolve_mime_type(mime_type, filename)
    media_type = detect_media_type(mime_type, filename)
    size_mb = size / (1024 * 1024)

    if media_type == "image":
        if mime_type not in IMAGE_TYPES:
            raise MediaValidationError("Please upload a valid image file (JPG, PNG, WebP, GIF)")
        if size_mb > MAX_IMAGE_UPLOAD_MB:
            raise MediaValidationError(f"Image size must be less than {MAX_IMAGE_UPLOAD_MB:g}MB")
    else:
        if mime_type not in VIDEO_TYPES:
            raise MediaValidationError("Please upload a valid video file (MP4, MOV, WebM)")
        if size_mb > MAX_VIDEO_UPLOAD_MB:
            raise MediaValidationError(f"Video size must be less than {MAX_VIDEO_UPLOAD_MB:g}MB for best results")

    return media_type


def safe_filename(filename: str) -> str:
    name = Path(filename).name
    return re.sub(r"[^A-Za-z0-9._-]+", "_", name) or "upload"


def stage_upload(data: bytes, filename: str, upload_dir: Path = UPLOAD_DIR) -> Path:
    """
    Write upload bytes to the staging directory under a unique name and return the path.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{uuid.uuid4().hex[:8]}_{safe_filename(filename)}"
    path.write_bytes(data)
    logger.debug("Staged %s (%d bytes)", path, len(data))
    return path


@contextmanager
def staged_upload(data: bytes, filename: str, upload_dir: Path = UPLOAD_DIR):
    """
    Stage upload bytes for the duration of a with block, then delete the file.
    """
    path = stage_upload(data, filename, upload_dir=upload_dir)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug("Removed staged %s", path)


def record_upload(result: AnalysisResult, filename: str, location: str = "",
                  media_type: Optional[str] = None, session_factory=SessionLocal) -> Optional[UploadRecord]:
    """
    Save an analysed upload to the history table.

    A failed write is logged and rolled back; the analysis itself is unaffected.
    """
    session = session_factory()
    try:
        row = UploadRecordRow(
            filename=filename,
            location=location.strip() or "Unspecified location",
            media_type=media_type,
            health_score=result.health_score,
            status="completed",
            source=result.source,
        )
        session.add(row)
        session.commit()
        return _to_record(row)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("❌ Failed to record upload %s: %s", filename, e)
        return None
    finally:
        session.close()


def _to_record(row: UploadRecordRow) -> UploadRecord:
    created = row.created_at
    if created is not None and created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    timestamp = created.isoformat().replace("+00:00", "Z") if created else ""
    return UploadRecord(
        id=str(row.upload_id),
        filename=row.filename,
        location=row.location,
        timestamp=timestamp,
        health_score=row.health_score if row.health_score is not None else 0,
        status=row.status if row.status in UPLOAD_STATUSES else "failed",
    )


def recent_uploads(limit: int = 10, session_factory=SessionLocal) -> List[UploadRecord]:
    """Most recent uploads first."""
    with session_factory() as session:
        rows = (
            session.query(UploadRecordRow)
            .order_by(UploadRecordRow.created_at.desc(), UploadRecordRow.upload_id.desc())
            .limit(limit)
            .all()
        )
        return [_to_record(row) for row in rows]


def clear_history(session_factory=SessionLocal) -> int:
    """Delete every upload record. Returns the number of rows removed."""
    with session_factory() as session:
        deleted = session.query(UploadRecordRow).delete()
        session.commit()
    logger.info("Cleared %d upload record(s)", deleted)
    return deleted


def clear_staged_uploads(upload_dir: Path = UPLOAD_DIR) -> int:
    """Remove staged upload files. Returns the number of entries removed."""
    if not upload_dir.exists():
        return 0
    removed = 0
    for entry in upload_dir.glob("*"):
        if entry.is_file():
            entry.unlink()
        elif entry.is_dir():
            shutil.rmtree(entry)
        removed += 1
    return removed
