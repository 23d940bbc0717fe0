"""Prompt template and reply parsing shared by the LLM query parsers.

Both LLM adapters only move text; the prompt wording and the tolerant
JSON extraction from the model's reply live here so that every provider
is parsed the same way.
"""

import json
import logging
import re
from typing import Any, Optional

from ..domain.models import Intent, ParsedInput

logger = logging.getLogger(__name__)

DEFAULT_LLM_CONFIDENCE = 0.8

SYSTEM_MESSAGE = (
    "You are a helpful travel assistant. Extract place names and intent from "
    "user queries. Always return valid JSON only."
)

PROMPT_TEMPLATE = """You are a travel assistant. Extract the place name and intent from this user query: "{query}"

Return ONLY a JSON object with this exact format:
{{
  "placeName": "extracted place name (capitalize properly)",
  "intent": "weather" or "places" or "both" or "full",
  "confidence": 0.0 to 1.0
}}

Intent rules:
- "weather": user only asks about temperature/weather
- "places": user only asks about places/attractions to visit
- "both": user asks about both weather AND places
- "full": user wants to plan a trip or asks for comprehensive planning

Examples:
- "I'm going to Bangalore, what is the temperature there" → {{"placeName": "Bangalore", "intent": "weather", "confidence": 0.95}}
- "I'm going to go to Bangalore, let's plan my trip" → {{"placeName": "Bangalore", "intent": "full", "confidence": 0.95}}
- "What places can I visit in Paris?" → {{"placeName": "Paris", "intent": "places", "confidence": 0.9}}

Return ONLY the JSON, no other text."""

# Greedy on purpose: spans from the first "{" to the last "}".
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def build_prompt(query: str) -> str:
    """Render the extraction prompt for a query."""
    return PROMPT_TEMPLATE.format(query=query.replace('"', "'"))


def _parse_confidence(value: Any) -> float:
    if isinstance(value, bool) or not value:
        return DEFAULT_LLM_CONFIDENCE
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_LLM_CONFIDENCE


def parse_model_reply(text: Optional[str], source: str) -> Optional[ParsedInput]:
    """Turn a model reply into a ParsedInput.

    Parameters
    ----------
    text : str or None
        Raw reply text; may wrap the JSON in prose or code fences.
    source : str
        Parser name recorded on the result.

    Returns
    -------
    ParsedInput or None
        None when the reply holds no JSON object, the JSON is malformed,
        ``placeName`` is missing or blank, or ``intent`` is unknown.
    """
    if not text:
        return None

    match = _JSON_OBJECT_RE.search(text)
    if not match:
        logger.debug("No JSON object in model reply", extra={"source": source})
        return None

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.debug(
            "Malformed JSON in model reply",
            extra={"source": source, "error": str(e)},
        )
        return None

    if not isinstance(payload, dict):
        return None

    place_name = payload.get("placeName")
    if not isinstance(place_name, str) or not place_name.strip():
        return None

    intent = Intent.parse(payload.get("intent"))
    if intent is None:
        logger.debug(
            "Unknown intent in model reply",
            extra={"source": source, "intent": payload.get("intent")},
        )
        return None

    return ParsedInput(
        place_name=place_name.strip(),
        intent=intent,
        confidence=_parse_confidence(payload.get("confidence")),
        source=source,
    )
