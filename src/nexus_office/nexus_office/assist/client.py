from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models"

MOCK_RESPONSE = (
    '[Mock AI Response] Here is a draft announcement about "{topic}". '
    "Please configure your API_KEY to see real AI magic!"
)
EMPTY_RESPONSE = "Failed to generate content."
ERROR_RESPONSE = "Error generating content. Please try again."


def build_prompt(topic: str, tone: str) -> str:
    return (
        f'Write a professional internal company announcement about: "{topic}". '
        f"The tone should be {tone}. Keep it concise (under 100 words). "
        "Format with clear line breaks."
    )


def _extract_text(body: Any) -> str:
    """Concatenated text of the first candidate.

    No candidates means empty text; any other unexpected shape is a ValueError.
    """

    if not isinstance(body, dict):
        raise ValueError("response body is not an object")
    candidates = body.get("candidates") or []
    if not isinstance(candidates, list):
        raise ValueError("candidates is not a list")
    if not candidates:
        return ""

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise ValueError("candidate has no parts")

    texts = [p.get("text") if isinstance(p, dict) else None for p in parts]
    if not all(isinstance(t, str) for t in texts):
        raise ValueError("part text is not a string")
    return "".join(texts)


class AnnouncementDraftClient:
    """Gemini-backed announcement drafting.

    Never raises: a missing key yields a labeled placeholder, any service
    failure yields a readable error string. One attempt, no retry.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._model = model
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._http = session or requests

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def generate_draft(self, topic: str, tone: str) -> str:
        if not self._api_key:
            logger.warning("API key is missing. Returning mock response.")
            return MOCK_RESPONSE.format(topic=topic)

        url = f"{self._endpoint}/{self._model}:generateContent"
        payload = {"contents": [{"parts": [{"text": build_prompt(topic, tone)}]}]}

        try:
            resp = self._http.post(
                url,
                params={"key": self._api_key},
                json=payload,
                timeout=self._timeout,
            )
            resp.raise_for_status()
            text = _extract_text(resp.json())
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.error("Gemini API error: %s", e)
            return ERROR_RESPONSE

        return text.strip() or EMPTY_RESPONSE
