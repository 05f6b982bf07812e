from types import SimpleNamespace

import pytest

from core.exceptions import ClientUnavailableError
from tools.gemini_utils import build_prompt, generate_reef_assessment, get_gemini_client, is_usable_key


class FakeModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(text=self.text)


def fake_client(text='{"healthScore": 80}'):
    return SimpleNamespace(models=FakeModels(text))


@pytest.mark.parametrize("key", [None, "", "   ", "your_gemini_api_key_here"])
def test_unusable_keys(key):
    assert not is_usable_key(key)
    with pytest.raises(ClientUnavailableError):
        get_gemini_client(key)


def test_real_looking_key_is_usable():
    assert is_usable_key("AIzaSyExample")


def test_prompt_names_media_type_and_json_shape():
    prompt = build_prompt("video frame")
    assert "underwater coral reef video frame" in prompt
    for field in ('"healthScore"', '"biodiversityScore"', '"trend"', '"summary"', '"species"'):
        assert field in prompt
    assert "{{" not in prompt


def test_assessment_sends_inline_media_and_prompt():
    client = fake_client()
    text = generate_reef_assessment(client, b"jpeg", "image/jpeg", "image", model="gemini-test")

    assert text == '{"healthScore": 80}'
    call = client.models.calls[0]
    assert call["model"] == "gemini-test"
    part, prompt = call["contents"]
    assert part.inline_data.data == b"jpeg"
    assert part.inline_data.mime_type == "image/jpeg"
    assert prompt == build_prompt("image")
    assert call["config"].response_mime_type == "application/json"


def test_assessment_empty_reply_is_empty_string():
    assert generate_reef_assessment(fake_client(text=None), b"x", "image/png", "image") == ""
