"""
gemini_utils.py — Gemini Client & Reef Assessment Prompt
--------------------------------------------------------

Thin wrapper around the google-genai SDK used by the analysis pipeline.

Features:
- Builds a Gemini client only when a real API key is configured
- Holds the reef assessment prompt and its JSON response contract
- Sends one inline image (or video) with the prompt and returns the raw text

Response contract requested from the model:

    {
      "healthScore": 0-100,
      "biodiversityScore": 0-100,
      "trend": "improving" | "stable" | "declining",
      "summary": "2-3 sentences",
      "species": [{"name": str, "count": int, "category": "fish" | "coral" | "invertebrate"}]
    }

Dependencies:
- google-genai
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from config.settings import GEMINI_API_KEY, GEMINI_MODEL, GEMINI_PLACEHOLDER_KEY
from core.exceptions import ClientUnavailableError

logger = logging.getLogger(__name__)


REEF_PROMPT = """Analyze this underwater coral reef {media_type} and provide a detailed assessment. Please respond in the following JSON format only, no additional text:

{{
  "healthScore": <number 0-100 indicating overall reef health>,
  "biodiversityScore": <number 0-100 indicating biodiversity level>,
  "trend": "<'improving' | 'stable' | 'declining'>",
  "summary": "<brief 2-3 sentence summary of reef condition>",
  "species": [
    {{"name": "<species name>", "count": <estimated count>, "category": "<'fish' | 'coral' | 'invertebrate'>"}}
  ]
}}

Consider the following factors:
- Fish species diversity and population counts
- Coral coverage and health (bleaching, growth)
- Water clarity and overall ecosystem vitality
- Presence of indicator species
- Signs of environmental stress or recovery

Identify as many distinct species as possible with estimated counts."""


def build_prompt(media_type: str) -> str:
    return REEF_PROMPT.format(media_type=media_type)


def is_usable_key(api_key: Optional[str]) -> bool:
    """A key is usable unless it is missing, blank, or the .env.example placeholder."""
    return bool(api_key and api_key.strip() and api_key.strip() != GEMINI_PLACEHOLDER_KEY)


def get_gemini_client(api_key: Optional[str] = GEMINI_API_KEY) -> genai.Client:
    """
    Build a Gemini client.

    Raises:
        ClientUnavailableError: If no usable API key is configured
    """
    if not is_usable_key(api_key):
        raise ClientUnavailableError("No valid Gemini API key found")
    return genai.Client(api_key=api_key.strip())


def generate_reef_assessment(client: genai.Client, data: bytes, mime_type: str, media_type: str,
                             model: str = GEMINI_MODEL) -> str:
    """
    Send media plus the reef prompt to Gemini.

    Args:
        client (genai.Client): Configured client
        data (bytes): Image or video bytes, sent inline
        mime_type (str): MIME type of `data`
        media_type (str): "image" or "video", used in the prompt wording
        model (str): Gemini model id

    Returns:
        str: Raw response text (expected to contain the JSON object)
    """
    logger.debug("Sending %d bytes (%s) to %s", len(data), mime_type, model)
    response = client.models.generate_content(
        model=model,
        contents=[
            types.Part.from_bytes(data=data, mime_type=mime_type),
            build_prompt(media_type),
        ],
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            temperature=0.2,
        ),
    )
    return response.text or ""
