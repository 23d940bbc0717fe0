"""Shared fixtures."""

from __future__ import annotations

from datetime import date
from typing import Dict, List

import pytest

from trip_orchestrator.config import reset_config
from trip_orchestrator.domain.models import (
    EventRecord,
    EventsResult,
    Helpline,
    HelplineResult,
    MetroStation,
    PlaceCategory,
    PlaceRecord,
    Rental,
    RentalResult,
    TransportResult,
    UserProfile,
    WeatherConditions,
    WeatherSafetyResult,
)

from stubs import StubProvider, place


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep API keys from the developer's environment out of tests."""
    for var in ("TRIP_NLP_GEMINI_API_KEY", "TRIP_NLP_OPENAI_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def paris_records() -> List[PlaceRecord]:
    attractions = [
        place(f"Sight {i}", PlaceCategory.ATTRACTION, popularity=0.9) for i in range(1, 7)
    ]
    gems = [place("Quiet Garden", PlaceCategory.ATTRACTION, popularity=0.2)]
    restaurants = [place(f"Bistro {i}", PlaceCategory.RESTAURANT) for i in range(1, 4)]
    pubs = [place("Le Pub", PlaceCategory.PUB)]
    return attractions + gems + restaurants + pubs


@pytest.fixture
def full_providers(paris_records) -> Dict[str, StubProvider]:
    return {
        "weather": StubProvider(
            WeatherSafetyResult(
                place_name="Paris, France",
                current=WeatherConditions(
                    temperature=21.0,
                    precipitation_probability=10.0,
                    wind_speed=8.0,
                    condition="Clear",
                ),
            )
        ),
        "places": StubProvider(paris_records),
        "events": StubProvider(
            EventsResult(
                place_name="Paris, France",
                events=(EventRecord(name="Jazz Night", date="2025-06-01", time="19:00"),),
                source="stub",
            )
        ),
        "transport": StubProvider(
            TransportResult(
                place_name="Paris, France",
                metro_stations=(MetroStation(name="Cité", latitude=48.85, longitude=2.34),),
            )
        ),
        "rentals": StubProvider(
            RentalResult(
                place_name="Paris, France",
                rentals=(Rental(name="Velib", type="bike", latitude=48.8, longitude=2.3),),
            )
        ),
        "helplines": StubProvider(
            HelplineResult(
                country="FR",
                helplines=(Helpline(name="Emergency", number="112", type="emergency"),),
            )
        ),
    }


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(visit_date=date(2025, 6, 1))
