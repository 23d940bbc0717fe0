"""NLP ports - Abstractions for query understanding.

These protocols define the contracts for turning a raw query into a
ParsedInput, allowing LLM-backed and rule-based implementations to be
swapped without changing the orchestrator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import ParsedInput


class LanguageModelParserPort(Protocol):
    """Port for an LLM completion used to parse queries.

    Implementations:
    - adapters/nlp/gemini_adapter.py (GeminiParserAdapter)
    - adapters/nlp/openai_adapter.py (OpenAIParserAdapter)
    """

    name: str

    def complete(self, prompt: str) -> Optional[str]:
        """Send a prompt and return the model's raw text reply.

        Args:
            prompt: Fully rendered prompt text.

        Returns:
            The reply text, or None when the reply carried no text.

        Raises:
            LanguageModelError: On transport failure or a non-OK status.
        """
        ...


class IntentExtractorPort(Protocol):
    """Port for place-name and intent extraction.

    Implementation: services/intent_extractor.py (IntentExtractionService)
    """

    def extract(self, query: str) -> ParsedInput:
        """Extract the place name and intent from a query. Never raises."""
        ...
