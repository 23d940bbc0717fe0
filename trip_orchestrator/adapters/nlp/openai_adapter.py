"""OpenAI chat-completions query parser adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from ...config import IntentConfig, get_config
from ...domain.errors import LanguageModelError
from ...nlp.prompts import SYSTEM_MESSAGE


@dataclass
class OpenAIParserAdapter:
    """OpenAI chat-completions adapter.

    This adapter implements LanguageModelParserPort.

    Attributes:
        config: Intent configuration holding the API key and model
        session: HTTP session, injectable for tests
    """

    config: IntentConfig = field(default_factory=lambda: get_config().nlp)
    session: Any = field(default_factory=requests.Session, repr=False)
    name: str = "openai"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def complete(self, prompt: str) -> Optional[str]:
        """Send the prompt as the user message of a chat completion.

        Args:
            prompt: Fully rendered prompt text.

        Returns:
            The first choice's message content, or None if empty.

        Raises:
            LanguageModelError: If the key is missing, the request failed
                or OpenAI answered with a non-OK status.
        """
        if not self.config.openai_api_key:
            raise LanguageModelError("OpenAI API key is not configured", provider=self.name)

        body = {
            "model": self.config.openai_model,
            "messages": [
                {"role": "system", "content": SYSTEM_MESSAGE},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

        try:
            response = self.session.post(
                self.config.openai_url,
                headers={"Authorization": f"Bearer {self.config.openai_api_key}"},
                json=body,
                timeout=self.config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            raise LanguageModelError("OpenAI request failed", cause=e, provider=self.name)

        if not response.ok:
            self._logger.warning(
                "OpenAI API error",
                extra={"status": response.status_code},
            )
            raise LanguageModelError(
                f"OpenAI API error: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LanguageModelError("OpenAI returned invalid JSON", cause=e, provider=self.name)

        try:
            return data["choices"][0]["message"]["content"] or None
        except (KeyError, IndexError, TypeError):
            self._logger.debug("OpenAI reply carried no content")
            return None
