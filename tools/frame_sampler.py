"""
frame_sampler.py — Best-Frame Selection for Reef Videos with OpenCV
-------------------------------------------------------------------

Picks the single most informative frame from an uploaded reef video so that
only one still image has to be sent to the AI model.

Features:
✅ Samples evenly spaced frames, skipping the first and last 5% of the clip
✅ Scores frames by sharpness, edge density and color saturation
✅ Penalises dark or washed-out frames
✅ Returns the winning frame as JPEG bytes plus a data URL for display

Busy, sharp, colorful frames tend to be the ones with the most fish and coral
structure in view, so the highest scoring frame is the one analysed.

Dependencies:
- OpenCV for decoding, scoring and JPEG encoding
- numpy
"""

import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import cv2
import numpy as np

from config.settings import FRAME_SAMPLE_COUNT
from core.exceptions import FrameExtractionError

logger = logging.getLogger(__name__)

# Fraction of the clip ignored at each end (camera handling, fades)
EDGE_MARGIN = 0.05

# Mean luminance outside this range counts as a bad exposure
MIN_LUMINANCE = 40
MAX_LUMINANCE = 220
EXPOSURE_PENALTY = 0.5


@dataclass
class SampledFrame:
    index: int
    timestamp: float
    score: float
    jpeg: bytes

    @property
    def data_url(self) -> str:
        return to_data_url(self.jpeg)


def to_data_url(jpeg_bytes: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")


class FrameSampler:
    """
    Samples frames from a video and selects the best one for analysis.

    Args:
        sample_count (int): Number of frames to score
        max_dimension (int): Longest side of the encoded JPEG, larger frames are downscaled
        jpeg_quality (int): OpenCV JPEG quality (0-100)
    """
    def __init__(self, sample_count=FRAME_SAMPLE_COUNT, max_dimension=1280, jpeg_quality=90):
        if sample_count < 1:
            raise ValueError("sample_count must be at least 1")
        self.sample_count = sample_count
        self.max_dimension = max_dimension
        self.jpeg_quality = jpeg_quality

    def sample_positions(self, frame_count: int) -> List[int]:
        """
        Evenly spaced frame indices inside the clip, excluding the edge margins.
        """
        if frame_count <= 0:
            return []
        start = int(frame_count * EDGE_MARGIN)
        end = max(start, int(frame_count * (1 - EDGE_MARGIN)) - 1)
        if self.sample_count == 1:
            return [(start + end) // 2]
        positions = np.linspace(start, end, num=self.sample_count)
        return sorted({int(round(p)) for p in positions})

    def sample_frames(self, video_path) -> List[Tuple[int, float, np.ndarray]]:
        """
        Read candidate frames from a video.

        Args:
            video_path (str or Path): Video file on disk

        Returns:
            list[tuple]: (frame index, timestamp in seconds, BGR frame) for each decoded sample

        Raises:
            FrameExtractionError: If the file cannot be opened
        """
        capture = cv2.VideoCapture(str(video_path))
        if not capture.isOpened():
            raise FrameExtractionError(f"Could not open video: {Path(video_path).name}")

        try:
            fps = capture.get(cv2.CAP_PROP_FPS) or 0.0
            frame_count = int(capture.get(cv2.CAP_PROP_FRAME_COUNT) or 0)

            samples = []
            for index in self.sample_positions(frame_count):
                capture.set(cv2.CAP_PROP_POS_FRAMES, index)
                ok, frame = capture.read()
                if ok and frame is not None:
                    samples.append((index, index / fps if fps else 0.0, frame))

            if not samples:
                # No frame count, or seeking failed (common for WebM): read from the start instead
                logger.debug("Seeking yielded no frames in %s, reading sequentially", Path(video_path).name)
                capture.set(cv2.CAP_PROP_POS_FRAMES, 0)
                samples = self._read_sequential(capture, fps)
            return samples
        finally:
            capture.release()

    def _read_sequential(self, capture, fps) -> List[Tuple[int, float, np.ndarray]]:
        samples = []
        index = 0
        while len(samples) < self.sample_count:
            ok, frame = capture.read()
            if not ok or frame is None:
                break
            samples.append((index, index / fps if fps else 0.0, frame))
            index += 1
        return samples

    def score_frame(self, frame: np.ndarray) -> float:
        """
        Rate how much usable detail a frame holds.

        Score = log sharpness (Laplacian variance) x (0.5 + edge density) x (0.5 + mean saturation),
        halved when the frame is too dark or too bright.
        """
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        sharpness = cv2.Laplacian(gray, cv2.CV_64F).var()
        edges = cv2.Canny(gray, 100, 200)
        edge_density = float(np.count_nonzero(edges)) / edges.size
        saturation = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)[:, :, 1].mean() / 255.0

        score = float(np.log1p(sharpness) * (0.5 + edge_density) * (0.5 + saturation))

        luminance = gray.mean()
        if luminance < MIN_LUMINANCE or luminance > MAX_LUMINANCE:
            score *= EXPOSURE_PENALTY
        return score

    def encode_jpeg(self, frame: np.ndarray) -> bytes:
        height, width = frame.shape[:2]
        longest = max(height, width)
        if longest > self.max_dimension:
            scale = self.max_dimension / longest
            frame = cv2.resize(frame, (int(width * scale), int(height * scale)), interpolation=cv2.INTER_AREA)

        ok, buffer = cv2.imencode(".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), self.jpeg_quality])
        if not ok:
            raise FrameExtractionError("JPEG encoding failed")
        return buffer.tobytes()

    def select_best_frame(self, video_path) -> Optional[SampledFrame]:
        """
        Return the highest scoring sampled frame, or None if no frame could be decoded.
        """
        samples = self.sample_frames(video_path)
        if not samples:
            logger.warning("❌ No frames decoded from %s", Path(video_path).name)
            return None

        scored = [(self.score_frame(frame), index, timestamp, frame) for index, timestamp, frame in samples]
        best_score, best_index, best_timestamp, best_frame = max(scored, key=lambda item: item[0])
        logger.info(
            "Selected frame %d (%.1fs, score %.2f) of %d sampled from %s",
            best_index, best_timestamp, best_score, len(samples), Path(video_path).name,
        )
        return SampledFrame(
            index=best_index,
            timestamp=best_timestamp,
            score=best_score,
            jpeg=self.encode_jpeg(best_frame),
        )
