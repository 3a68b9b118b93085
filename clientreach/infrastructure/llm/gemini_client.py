"""
Gemini Client - LLM Text Generation
===================================

ARCHITECTURAL DECISION:
- Calls the Gemini generateContent REST endpoint directly with requests
- Returns ONLY the raw generated text; no parsing happens here
- No fallback: a missing key or a failed call is reported to the caller

EXTENSIBILITY:
- To use a different model: set GEMINI_MODEL
- To use another provider: implement TextGenerator
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests

from ..config import GeminiSettings, get_settings
from ...domain.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class TextGenerator(ABC):
    """Given a prompt, return generated text."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        ...


class GeminiClient(TextGenerator):
    """
    Text generation via Google Gemini.

    USAGE:
        client = GeminiClient()
        text = client.generate("Write a haiku about dentists")
    """

    SERVICE = "gemini"

    def __init__(self, settings: Optional[GeminiSettings] = None):
        settings = settings or get_settings().gemini
        self._api_key = settings.api_key
        self._api_url = settings.api_url
        self._model = settings.model
        self._timeout = settings.timeout_seconds

        if not self._api_key:
            logger.warning("No GOOGLE_AI_API_KEY set. AI endpoints will fail.")

    def generate(self, prompt: str) -> str:
        """
        Send a single user turn and return the generated text.

        Raises:
            ConfigurationError: API key not configured.
            UpstreamError: Transport failure, non-success status or empty candidates.
        """
        if not self._api_key:
            raise ConfigurationError("API key for Google AI not configured.")

        url = f"{self._api_url}/models/{self._model}:generateContent"
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ]
        }

        try:
            response = requests.post(
                url,
                params={"key": self._api_key},
                json=payload,
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            logger.error(f"Gemini API timeout after {self._timeout}s")
            raise UpstreamError(self.SERVICE, "Gemini API timed out") from e
        except requests.RequestException as e:
            logger.error(f"Gemini API error: {e}")
            raise UpstreamError(self.SERVICE, f"Gemini API request failed: {e}") from e

        if not response.ok:
            logger.error(f"Gemini API Error ({response.status_code}): {response.text}")
            raise UpstreamError(
                self.SERVICE,
                f"Gemini API returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(self.SERVICE, "Gemini API returned invalid JSON") from e

        text = self._extract_response_text(data)
        if text is None:
            logger.error(f"Gemini API returned no candidates: {data}")
            raise UpstreamError(self.SERVICE, "Gemini API returned no candidates")

        logger.debug(f"Gemini generated {len(text)} characters")
        return text

    def _extract_response_text(self, data: dict) -> Optional[str]:
        """Join the text parts of the first candidate."""
        try:
            candidates = data.get("candidates") or []
            if not candidates:
                return None
            parts = candidates[0].get("content", {}).get("parts", [])
            return "".join(part.get("text", "") for part in parts)
        except (AttributeError, TypeError):
            return None
