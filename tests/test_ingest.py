import pytest

from core.demo import generate_demo_analysis
from core.exceptions import MediaValidationError
from core.ingest import (
    clear_history,
    clear_staged_uploads,
    detect_media_type,
    record_upload,
    recent_uploads,
    resolve_mime_type,
    safe_filename,
    stage_upload,
    staged_upload,
    validate_upload,
)

MB = 1024 * 1024


# --- Validation ---

@pytest.mark.parametrize("filename,mime_type,expected", [
    ("reef.jpg", "image/jpeg", "image"),
    ("reef.webp", "image/webp", "image"),
    ("dive.mp4", "video/mp4", "video"),
    ("dive.mov", "video/quicktime", "video"),
    ("dive.MOV", "application/octet-stream", "video"),
    ("reef.png", None, "image"),
])
def test_accepts_supported_uploads(filename, mime_type, expected):
    assert validate_upload(filename, mime_type, 2 * MB) == expected


def test_rejects_large_image():
    with pytest.raises(MediaValidationError, match="Image size must be less than 20MB"):
        validate_upload("reef.jpg", "image/jpeg", 21 * MB)


def test_rejects_large_video():
    with pytest.raises(MediaValidationError, match="Video size must be less than 50MB"):
        validate_upload("dive.mp4", "video/mp4", 51 * MB)


def test_video_between_image_and_video_limits_is_accepted():
    assert validate_upload("dive.mp4", "video/mp4", 30 * MB) == "video"


def test_rejects_unsupported_image_type():
    with pytest.raises(MediaValidationError, match="valid image file"):
        validate_upload("reef.bmp", "image/bmp", MB)


def test_rejects_unsupported_video_type():
    with pytest.raises(MediaValidationError, match="valid video file"):
        validate_upload("dive.avi", "video/x-msvideo", MB)


def test_rejects_non_media():
    with pytest.raises(MediaValidationError):
        validate_upload("notes.pdf", "application/pdf", MB)


def test_detect_media_type_prefers_mime_prefix():
    assert detect_media_type("image/heic", "photo.mp4") == "image"
    assert detect_media_type("", "clip.webm") == "video"


def test_resolve_mime_type_from_extension():
    assert resolve_mime_type("", "clip.m4v") == "video/x-m4v"
    assert resolve_mime_type("IMAGE/PNG", "x.png") == "image/png"
    assert resolve_mime_type(None, "unknown.xyz") == ""


# --- Staging ---

def test_safe_filename_strips_paths_and_symbols():
    assert safe_filename("../../etc/reef shot (1).jpg") == "reef_shot_1_.jpg"


def test_stage_upload_writes_unique_files(tmp_path):
    first = stage_upload(b"one", "dive.mp4", upload_dir=tmp_path / "uploads")
    second = stage_upload(b"two", "dive.mp4", upload_dir=tmp_path / "uploads")

    assert first != second
    assert first.read_bytes() == b"one"
    assert second.read_bytes() == b"two"
    assert first.name.endswith("_dive.mp4")


def test_staged_upload_is_removed_after_use(tmp_path):
    upload_dir = tmp_path / "uploads"
    with staged_upload(b"video", "dive.mp4", upload_dir=upload_dir) as path:
        assert path.read_bytes() == b"video"

    assert not path.exists()
    assert list(upload_dir.iterdir()) == []


def test_staged_upload_is_removed_when_analysis_fails(tmp_path):
    upload_dir = tmp_path / "uploads"
    with pytest.raises(RuntimeError):
        with staged_upload(b"video", "dive.mp4", upload_dir=upload_dir) as path:
            raise RuntimeError("analysis crashed")

    assert not path.exists()
    assert list(upload_dir.iterdir()) == []


def test_clear_staged_uploads(tmp_path):
    upload_dir = tmp_path / "uploads"
    stage_upload(b"one", "a.mp4", upload_dir=upload_dir)
    stage_upload(b"two", "b.jpg", upload_dir=upload_dir)
    (upload_dir / "nested").mkdir()

    assert clear_staged_uploads(upload_dir) == 3
    assert list(upload_dir.iterdir()) == []


def test_clear_staged_uploads_missing_dir(tmp_path):
    assert clear_staged_uploads(tmp_path / "nope") == 0


# --- Upload History ---

def test_record_and_list_uploads(session_factory):
    result = generate_demo_analysis(11)
    record = record_upload(result, "dive.mp4", location="Palau", media_type="video",
                           session_factory=session_factory)

    assert record is not None
    assert record.filename == "dive.mp4"
    assert record.location == "Palau"
    assert record.health_score == result.health_score
    assert record.status == "completed"
    assert record.timestamp.endswith("Z")

    assert [u.filename for u in recent_uploads(session_factory=session_factory)] == ["dive.mp4"]


def test_blank_location_is_unspecified(session_factory):
    record = record_upload(generate_demo_analysis(3), "reef.jpg", location="   ",
                           session_factory=session_factory)
    assert record.location == "Unspecified location"


def test_recent_uploads_newest_first_with_limit(session_factory):
    for index in range(5):
        record_upload(generate_demo_analysis(index), f"clip{index}.mp4", session_factory=session_factory)

    uploads = recent_uploads(limit=3, session_factory=session_factory)
    assert [u.filename for u in uploads] == ["clip4.mp4", "clip3.mp4", "clip2.mp4"]


def test_clear_history(session_factory):
    record_upload(generate_demo_analysis(1), "a.jpg", session_factory=session_factory)
    record_upload(generate_demo_analysis(2), "b.jpg", session_factory=session_factory)

    assert clear_history(session_factory=session_factory) == 2
    assert recent_uploads(session_factory=session_factory) == []


def test_failed_write_returns_none(broken_session_factory):
    assert record_upload(generate_demo_analysis(1), "a.jpg", session_factory=broken_session_factory) is None
