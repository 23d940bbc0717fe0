"""Tests for the intent extraction service and its fallback chain."""

from unittest.mock import MagicMock

from trip_orchestrator.adapters.nlp.rule_based import RuleBasedQueryParser
from trip_orchestrator.domain.errors import LanguageModelError
from trip_orchestrator.domain.models import Intent
from trip_orchestrator.services.intent_extractor import IntentExtractionService

QUERY = "I'm going to Paris, let's plan my trip"


def make_parser(name, reply=None, error=None):
    parser = MagicMock()
    parser.name = name
    if error is not None:
        parser.complete.side_effect = error
    else:
        parser.complete.return_value = reply
    return parser


def test_rules_only_when_no_parsers():
    parsed = IntentExtractionService().extract(QUERY)
    assert parsed.place_name == "Paris"
    assert parsed.intent == Intent.FULL
    assert parsed.confidence == 0.7
    assert parsed.source == "rules"


def test_rules_confidence_without_place():
    parsed = RuleBasedQueryParser().extract("What is the weather like?")
    assert parsed.place_name == ""
    assert parsed.confidence == 0.3


def test_first_successful_parser_wins():
    gemini = make_parser("gemini", '{"placeName": "Paris", "intent": "both", "confidence": 0.9}')
    openai = make_parser("openai", '{"placeName": "Lyon", "intent": "weather"}')

    parsed = IntentExtractionService(parsers=(gemini, openai)).extract(QUERY)

    assert parsed.place_name == "Paris"
    assert parsed.intent == Intent.BOTH
    assert parsed.source == "gemini"
    openai.complete.assert_not_called()


def test_falls_through_on_transport_error():
    gemini = make_parser("gemini", error=LanguageModelError("boom", provider="gemini", status_code=500))
    openai = make_parser("openai", '{"placeName": "Paris", "intent": "full"}')

    parsed = IntentExtractionService(parsers=(gemini, openai)).extract(QUERY)

    assert parsed.source == "openai"
    assert parsed.confidence == 0.8


def test_falls_through_on_unusable_reply_to_rules():
    gemini = make_parser("gemini", "no json here")
    openai = make_parser("openai", '{"placeName": "Paris", "intent": "sightseeing"}')

    parsed = IntentExtractionService(parsers=(gemini, openai)).extract(QUERY)

    assert parsed.source == "rules"
    assert parsed.place_name == "Paris"
    gemini.complete.assert_called_once()
    openai.complete.assert_called_once()


def test_unexpected_parser_exception_never_escapes():
    broken = make_parser("gemini", error=RuntimeError("bug"))

    parsed = IntentExtractionService(parsers=(broken,)).extract(QUERY)

    assert parsed.source == "rules"


def test_prompt_contains_query():
    gemini = make_parser("gemini", '{"placeName": "Paris", "intent": "full"}')
    IntentExtractionService(parsers=(gemini,)).extract(QUERY)
    (prompt,), _ = gemini.complete.call_args
    assert QUERY.replace('"', "'") in prompt
