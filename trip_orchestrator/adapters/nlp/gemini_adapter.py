"""Google Gemini query parser adapter.

Calls the Gemini ``generateContent`` REST endpoint with ``requests`` and
returns the model's raw text. Parsing the JSON out of that text is left
to ``nlp.prompts`` so every LLM provider is handled the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from ...config import IntentConfig, get_config
from ...domain.errors import LanguageModelError


@dataclass
class GeminiParserAdapter:
    """Gemini completion adapter.

    This adapter implements LanguageModelParserPort.

    Attributes:
        config: Intent configuration holding the API key and model
        session: HTTP session, injectable for tests
    """

    config: IntentConfig = field(default_factory=lambda: get_config().nlp)
    session: Any = field(default_factory=requests.Session, repr=False)
    name: str = "gemini"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def endpoint(self) -> str:
        base = self.config.gemini_url.rstrip("/")
        return f"{base}/{self.config.gemini_model}:generateContent"

    def complete(self, prompt: str) -> Optional[str]:
        """Send the prompt to Gemini.

        Args:
            prompt: Fully rendered prompt text.

        Returns:
            The first candidate's text, or None if the reply had none.

        Raises:
            LanguageModelError: If the key is missing, the request failed
                or Gemini answered with a non-OK status.
        """
        if not self.config.gemini_api_key:
            raise LanguageModelError("Gemini API key is not configured", provider=self.name)

        try:
            response = self.session.post(
                self.endpoint,
                params={"key": self.config.gemini_api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
                timeout=self.config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            raise LanguageModelError("Gemini request failed", cause=e, provider=self.name)

        if not response.ok:
            self._logger.warning(
                "Gemini API error",
                extra={"status": response.status_code},
            )
            raise LanguageModelError(
                f"Gemini API error: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LanguageModelError("Gemini returned invalid JSON", cause=e, provider=self.name)

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"] or None
        except (KeyError, IndexError, TypeError):
            self._logger.debug("Gemini reply carried no text")
            return None
