"""Keyword-based intent classification for trip-planning queries.

Three disjoint keyword families are tested by substring against the
lowercased query, and a fixed decision table maps the hits to an Intent.

Example
-------
    >>> classify_intent("What's the weather in Lisbon?")
    <Intent.WEATHER: 'weather'>
    >>> classify_intent("Which places should I see in Rome?")
    <Intent.PLACES: 'places'>
    >>> classify_intent("Weather and places to see in Oslo")
    <Intent.BOTH: 'both'>
    >>> classify_intent("I'm going to Paris, let's plan my trip")
    <Intent.FULL: 'full'>
"""

from typing import Tuple

from ..domain.models import Intent

WEATHER_KEYWORDS: Tuple[str, ...] = (
    "weather",
    "temperature",
    "temp",
    "rain",
    "precipitation",
    "forecast",
    "hot",
    "cold",
)

PLACES_KEYWORDS: Tuple[str, ...] = (
    "places",
    "attractions",
    "visit",
    "see",
    "tourist",
    "sightseeing",
    "things to do",
    "where to go",
)

PLAN_KEYWORDS: Tuple[str, ...] = (
    "plan",
    "planning",
    "itinerary",
    "trip",
    "let's plan",
    "lets plan",
    "help me plan",
)


def _mentions_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify_intent(query: str) -> Intent:
    """Classify which information categories a query asks for.

    Decision table, evaluated in order:

    1. any plan keyword -> FULL
    2. weather and places keywords -> BOTH
    3. weather keywords only -> WEATHER
    4. places keywords only -> PLACES
    5. nothing recognised -> FULL (default to full planning)

    Parameters
    ----------
    query : str
        Raw query text.

    Returns
    -------
    Intent
        The classified intent; never None.
    """
    text = query.lower().replace("’", "'")

    has_plan = _mentions_any(text, PLAN_KEYWORDS)
    has_weather = _mentions_any(text, WEATHER_KEYWORDS)
    has_places = _mentions_any(text, PLACES_KEYWORDS)

    if has_plan:
        return Intent.FULL
    if has_weather and has_places:
        return Intent.BOTH
    if has_weather:
        return Intent.WEATHER
    if has_places:
        return Intent.PLACES
    return Intent.FULL
