"""
analysis.py — Reef Health Analysis Pipeline
-------------------------------------------

This module turns an uploaded underwater photo or video into an AnalysisResult:

✅ Checks for a usable Gemini API key and the per-request size limit
✅ Picks the best frame of a video and sends it as a still image
✅ Sends the media with the reef assessment prompt to Gemini
✅ Parses and clamps the JSON reply into display records
✅ Falls back to the seeded demo analysis on any failure

Every failure (missing key, oversized file, network/API error, malformed reply)
degrades to the same demo result. Nothing is retried.

Uses:
- google-genai (via tools.gemini_utils)
- OpenCV frame sampling (via tools.frame_sampler)
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Callable, Optional

import httpx
from google.genai import errors as genai_errors

from config.settings import DEMO_DELAY_SECONDS, MAX_IMAGE_SIZE_MB, MAX_VIDEO_SIZE_MB
from core.demo import analyze_reef_media_demo
from core.exceptions import AnalysisResponseError, ReefWatchError
from core.models import CATEGORIES, TRENDS, AnalysisResult, SpeciesCount, utc_now_iso
from tools.frame_sampler import FrameSampler, to_data_url
from tools.gemini_utils import generate_reef_assessment, get_gemini_client

logger = logging.getLogger(__name__)

DEFAULT_HEALTH_SCORE = 65
DEFAULT_BIODIVERSITY_SCORE = 60

# Provider failures that degrade to demo mode
FALLBACK_ERRORS = (ReefWatchError, genai_errors.APIError, httpx.HTTPError, ConnectionError, TimeoutError)


def _noop(message):
    pass


def _clamp_score(value, default: int) -> int:
    try:
        number = float(value) if value else default
    except (TypeError, ValueError):
        number = default
    return int(round(min(100, max(0, number))))


def _species_count(value) -> int:
    try:
        return max(0, int(value or 1))
    except (TypeError, ValueError, OverflowError):
        return 1


def parse_analysis_response(text: str) -> AnalysisResult:
    """
    Extract and normalise the JSON object from a Gemini reply.

    Raises:
        AnalysisResponseError: If no JSON object is present or it cannot be decoded
    """
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        raise AnalysisResponseError(f"No JSON object in response: {text[:200]!r}")

    try:
        data = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise AnalysisResponseError(f"Invalid JSON in response: {e}") from e
    if not isinstance(data, dict):
        raise AnalysisResponseError("Response JSON is not an object")

    entries = data.get("species") or []
    if not isinstance(entries, list):
        raise AnalysisResponseError(f"Species is not a list: {entries!r}")

    species = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("name") or "").strip()
        if not name:
            continue
        category = entry.get("category")
        species.append(SpeciesCount(
            name=name,
            count=_species_count(entry.get("count")),
            category=category if category in CATEGORIES else "fish",
        ))

    trend = data.get("trend")
    confidence = data.get("confidence")

    return AnalysisResult(
        health_score=_clamp_score(data.get("healthScore"), DEFAULT_HEALTH_SCORE),
        biodiversity_score=_clamp_score(data.get("biodiversityScore"), DEFAULT_BIODIVERSITY_SCORE),
        trend=trend if trend in TRENDS else "stable",
        summary=data.get("summary") or "Analysis complete.",
        species=species,
        timestamp=utc_now_iso(),
        total_fish_count=sum(s.count for s in species if s.category == "fish"),
        confidence=_clamp_score(confidence, 0) if confidence is not None else None,
        source="gemini",
    )


def _best_video_frame(data: bytes, filename: str, video_path=None, sampler: Optional[FrameSampler] = None):
    """
    Run the frame sampler over the video, writing it to a temp file when it is not already on disk.
    """
    sampler = sampler or FrameSampler()
    if video_path is not None:
        return sampler.select_best_frame(video_path)

    suffix = Path(filename).suffix or ".mp4"
    with tempfile.NamedTemporaryFile(suffix=suffix) as handle:
        handle.write(data)
        handle.flush()
        return sampler.select_best_frame(handle.name)


def analyze_reef_media(data: bytes, filename: str, mime_type: str, media_type: str,
                       progress: Callable = _noop, client=None, video_path=None,
                       sampler: Optional[FrameSampler] = None,
                       demo_delay: float = DEMO_DELAY_SECONDS) -> AnalysisResult:
    """
    Analyse an uploaded reef image or video.

    Args:
        data (bytes): File contents
        filename (str): Original file name (also seeds demo mode)
        mime_type (str): Uploaded MIME type, may be empty
        media_type (str): "image" or "video"
        progress (callable): Receives status messages for the UI
        client: Pre-built Gemini client; built from settings when omitted
        video_path (Path): Staged copy of a video upload, if any
        sampler (FrameSampler): Frame sampler override
        demo_delay (float): Simulated latency for demo results

    Returns:
        AnalysisResult: Gemini analysis, or the seeded demo analysis on any failure
    """
    def demo(reason):
        logger.info("%s, using demo mode", reason)
        progress(f"{reason}. Using demo mode.")
        return analyze_reef_media_demo(data, filename, delay=demo_delay)

    if client is None:
        try:
            client = get_gemini_client()
        except ReefWatchError as e:
            return demo(str(e))

    try:
        payload = data
        payload_mime = mime_type or ("image/jpeg" if media_type == "image" else "video/mp4")
        limit_mb = MAX_IMAGE_SIZE_MB if media_type == "image" else MAX_VIDEO_SIZE_MB
        analyzed_frame = None

        if media_type == "video":
            progress("Selecting the clearest frame from the video...")
            frame = _best_video_frame(data, filename, video_path=video_path, sampler=sampler)
            if frame is not None:
                payload, payload_mime = frame.jpeg, "image/jpeg"
                limit_mb = MAX_IMAGE_SIZE_MB
                analyzed_frame = to_data_url(frame.jpeg)
            else:
                progress("No frame could be decoded, sending the full video.")

        # Inline request limit applies to what is actually sent
        size_mb = len(payload) / (1024 * 1024)
        if size_mb > limit_mb:
            return demo(f"File too large ({size_mb:.1f}MB)")

        progress("Sending media to Gemini...")
        prompt_media = "video frame" if analyzed_frame else media_type
        text = generate_reef_assessment(client, payload, payload_mime, prompt_media)

        progress("Parsing analysis...")
        result = parse_analysis_response(text)
        result.analyzed_frame = analyzed_frame
        logger.info("✅ Gemini analysis for %s: health %d", filename, result.health_score)
        return result

    except FALLBACK_ERRORS as e:
        logger.error("❌ Gemini analysis failed for %s: %s", filename, e)
        return demo("Gemini API error")


def analyze_reef_video(data: bytes, filename: str, mime_type: str = "video/mp4", **kwargs) -> AnalysisResult:
    """Video-only entry point kept for the original single-purpose upload form."""
    return analyze_reef_media(data, filename, mime_type, "video", **kwargs)
