import base64

import cv2
import numpy as np
import pytest

from core.exceptions import FrameExtractionError
from tools import frame_sampler
from tools.frame_sampler import FrameSampler, to_data_url

WIDTH, HEIGHT = 160, 120


def flat_frame(value=128):
    return np.full((HEIGHT, WIDTH, 3), value, dtype=np.uint8)


def reef_frame(seed=0):
    """Colourful high-detail frame: random blocks of saturated colour."""
    rng = np.random.default_rng(seed)
    blocks = rng.integers(40, 255, size=(HEIGHT // 8, WIDTH // 8, 3), dtype=np.uint8)
    blocks[..., 0] = 30
    return np.kron(blocks, np.ones((8, 8, 1), dtype=np.uint8))


def write_video(path, frames, fps=10):
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), fps, (WIDTH, HEIGHT))
    assert writer.isOpened()
    for frame in frames:
        writer.write(frame)
    writer.release()
    return path


# --- sample_positions ---

def test_positions_skip_clip_edges():
    positions = FrameSampler(sample_count=5).sample_positions(100)
    assert positions == [5, 27, 50, 72, 94]


def test_positions_for_empty_clip():
    assert FrameSampler().sample_positions(0) == []


def test_single_sample_is_middle_of_clip():
    assert FrameSampler(sample_count=1).sample_positions(100) == [49]


def test_positions_deduplicate_on_short_clips():
    assert FrameSampler(sample_count=12).sample_positions(3) == [0, 1]


def test_sample_count_must_be_positive():
    with pytest.raises(ValueError):
        FrameSampler(sample_count=0)


# --- score_frame ---

def test_detailed_frame_beats_flat_frame():
    sampler = FrameSampler()
    assert sampler.score_frame(reef_frame()) > sampler.score_frame(flat_frame())


def test_blur_lowers_score():
    sampler = FrameSampler()
    sharp = reef_frame(1)
    blurred = cv2.GaussianBlur(sharp, (15, 15), 0)
    assert sampler.score_frame(sharp) > sampler.score_frame(blurred)


def test_dark_frames_are_penalised(monkeypatch):
    sampler = FrameSampler()
    dark = (reef_frame(2) // 8).astype(np.uint8)

    penalised = sampler.score_frame(dark)
    monkeypatch.setattr(frame_sampler, "MIN_LUMINANCE", 0)
    unpenalised = sampler.score_frame(dark)

    assert penalised == pytest.approx(unpenalised * frame_sampler.EXPOSURE_PENALTY)


# --- encode_jpeg / data URLs ---

def test_large_frames_are_downscaled():
    sampler = FrameSampler(max_dimension=100)
    jpeg = sampler.encode_jpeg(reef_frame())
    decoded = cv2.imdecode(np.frombuffer(jpeg, dtype=np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape[:2] == (75, 100)


def test_small_frames_keep_their_size():
    jpeg = FrameSampler().encode_jpeg(reef_frame())
    decoded = cv2.imdecode(np.frombuffer(jpeg, dtype=np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape[:2] == (HEIGHT, WIDTH)


def test_data_url():
    url = to_data_url(b"\xff\xd8jpeg")
    assert url.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == b"\xff\xd8jpeg"


# --- select_best_frame ---

def test_selects_detailed_frame_from_video(tmp_path):
    frames = [flat_frame() for _ in range(30)]
    for index in range(15, 20):
        frames[index] = reef_frame(index)
    path = write_video(tmp_path / "dive.avi", frames)

    best = FrameSampler(sample_count=6).select_best_frame(path)

    assert best is not None
    assert 15 <= best.index <= 19
    assert best.timestamp == pytest.approx(best.index / 10)
    assert best.data_url.startswith("data:image/jpeg;base64,")
    assert cv2.imdecode(np.frombuffer(best.jpeg, dtype=np.uint8), cv2.IMREAD_COLOR) is not None


class UnseekableCapture:
    """Reports a frame count but returns nothing after a seek away from the start, like some WebM files."""

    def __init__(self, path, frames=100):
        self.frames = frames
        self.position = 0
        self.seek_failed = False
        self.released = False

    def isOpened(self):
        return True

    def get(self, prop):
        if prop == cv2.CAP_PROP_FPS:
            return 10.0
        if prop == cv2.CAP_PROP_FRAME_COUNT:
            return float(self.frames)
        return 0.0

    def set(self, prop, value):
        self.position = int(value)
        self.seek_failed = self.position != 0
        return True

    def read(self):
        if self.seek_failed or self.position >= self.frames:
            return False, None
        frame = reef_frame(self.position) if self.position == 7 else flat_frame()
        self.position += 1
        return True, frame

    def release(self):
        self.released = True


def test_failed_seeks_fall_back_to_sequential_reads(monkeypatch, tmp_path):
    captures = []

    def open_capture(path):
        captures.append(UnseekableCapture(path))
        return captures[-1]

    monkeypatch.setattr(cv2, "VideoCapture", open_capture)
    sampler = FrameSampler(sample_count=10)

    samples = sampler.sample_frames(tmp_path / "dive.webm")
    assert [index for index, _, _ in samples] == list(range(10))
    assert samples[3][1] == pytest.approx(0.3)
    assert captures[0].released

    best = sampler.select_best_frame(tmp_path / "dive.webm")
    assert best is not None
    assert best.index == 7


def test_unreadable_video_raises(tmp_path):
    with pytest.raises(FrameExtractionError):
        FrameSampler().select_best_frame(tmp_path / "missing.mp4")
