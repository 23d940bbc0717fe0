"""Tests for LLM prompt rendering and reply parsing."""

import pytest

from trip_orchestrator.domain.models import Intent
from trip_orchestrator.nlp.prompts import (
    DEFAULT_LLM_CONFIDENCE,
    build_prompt,
    parse_model_reply,
)


def test_prompt_embeds_query_and_format():
    prompt = build_prompt("Weather in Lima")
    assert '"Weather in Lima"' in prompt
    assert '"placeName"' in prompt
    assert "Return ONLY the JSON" in prompt


def test_prompt_neutralizes_double_quotes():
    prompt = build_prompt('Go to "Rome"')
    assert "\"Go to 'Rome'\"" in prompt


def test_parse_plain_json():
    parsed = parse_model_reply(
        '{"placeName": "Bangalore", "intent": "weather", "confidence": 0.95}', "gemini"
    )
    assert parsed.place_name == "Bangalore"
    assert parsed.intent == Intent.WEATHER
    assert parsed.confidence == pytest.approx(0.95)
    assert parsed.source == "gemini"


def test_parse_json_wrapped_in_prose_and_fences():
    reply = 'Sure!\n```json\n{"placeName": "Paris", "intent": "full"}\n```'
    parsed = parse_model_reply(reply, "openai")
    assert parsed.place_name == "Paris"
    assert parsed.intent == Intent.FULL
    assert parsed.confidence == DEFAULT_LLM_CONFIDENCE


def test_confidence_is_clamped():
    parsed = parse_model_reply('{"placeName": "Oslo", "intent": "both", "confidence": 3}', "x")
    assert parsed.confidence == 1.0


def test_unparseable_confidence_uses_default():
    parsed = parse_model_reply(
        '{"placeName": "Oslo", "intent": "both", "confidence": "high"}', "x"
    )
    assert parsed.confidence == DEFAULT_LLM_CONFIDENCE


@pytest.mark.parametrize(
    "reply",
    [
        None,
        "",
        "I could not find a place.",
        "{not json}",
        '{"intent": "weather"}',
        '{"placeName": "   ", "intent": "weather"}',
        '{"placeName": "Paris", "intent": "shopping"}',
        '{"placeName": 42, "intent": "weather"}',
    ],
)
def test_unusable_replies_return_none(reply):
    assert parse_model_reply(reply, "gemini") is None
