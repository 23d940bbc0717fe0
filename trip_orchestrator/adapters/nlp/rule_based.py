"""Rule-based query parser adapter.

This adapter wraps the deterministic extraction logic from
nlp/place_extraction.py and nlp/intent.py with the IntentExtractorPort
interface. It needs no network and never raises, which makes it the
last link of the extraction chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import ParsedInput
from ...nlp.intent import classify_intent
from ...nlp.place_extraction import extract_place_name

PLACE_FOUND_CONFIDENCE = 0.7
PLACE_MISSING_CONFIDENCE = 0.3


@dataclass
class RuleBasedQueryParser:
    """Keyword and pattern based query parser."""

    name: str = "rules"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def extract(self, query: str) -> ParsedInput:
        """Extract the place name and intent from a query.

        Args:
            query: Raw user query.

        Returns:
            ParsedInput with an empty place name when none was found.
        """
        place_name = extract_place_name(query) or ""
        intent = classify_intent(query)

        result = ParsedInput(
            place_name=place_name,
            intent=intent,
            confidence=(
                PLACE_FOUND_CONFIDENCE if place_name else PLACE_MISSING_CONFIDENCE
            ),
            source=self.name,
        )

        self._logger.debug(
            "Query parsed (rule-based)",
            extra={
                "place_name": result.place_name,
                "intent": result.intent.value,
                "confidence": result.confidence,
            },
        )

        return result
