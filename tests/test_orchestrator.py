"""End-to-end tests for the tourism orchestrator with stub collaborators."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from trip_orchestrator.adapters.cache import InMemoryCache
from trip_orchestrator.config import FanoutConfig, GeocodingConfig
from trip_orchestrator.domain.models import AgeGroup, Intent, TimeOfDay, UserProfile
from trip_orchestrator.services import (
    GeocodeResolver,
    IntentExtractionService,
    ProviderFanout,
    TourismOrchestrator,
)
from trip_orchestrator.services.tourism_orchestrator import (
    GENERIC_ERROR_MESSAGE,
    PLACE_NOT_FOUND_MESSAGE,
)

from stubs import StubGeocoder


@pytest.fixture
def geocoder():
    return StubGeocoder()


@pytest.fixture
def orchestrator(geocoder, full_providers):
    return TourismOrchestrator(
        intent_extractor=IntentExtractionService(),
        geocode_resolver=GeocodeResolver(
            geocoder=geocoder,
            cache=InMemoryCache(name="test"),
            config=GeocodingConfig(),
        ),
        provider_fanout=ProviderFanout(config=FanoutConfig(max_workers=6), **full_providers),
    )


@pytest.fixture
def adult_profile():
    return UserProfile(visit_date=date(2025, 6, 1), age_group=AgeGroup.AGE_26_40)


def test_paris_full_plan(orchestrator, geocoder, full_providers, adult_profile):
    response = orchestrator.process_query("I'm going to Paris, let's plan my trip", adult_profile)

    assert response.success
    assert response.error is None
    assert response.intent == Intent.FULL
    assert response.place_name == "Paris, France"
    assert response.geocoding.primary.latitude == pytest.approx(48.8566)
    assert response.geocoding.primary.longitude == pytest.approx(2.3522)
    assert geocoder.calls == []

    for name, provider in full_providers.items():
        assert len(provider.calls) == 1, name

    assert response.weather is not None
    assert response.transport is not None
    assert response.rentals is not None
    assert response.helplines is not None
    assert [p.name for p in response.places.pubs] == ["Le Pub"]

    day0 = [s for s in response.itinerary if s.date == "2025-06-01"]
    assert [s.time for s in day0] == [
        TimeOfDay.MORNING,
        TimeOfDay.AFTERNOON,
        TimeOfDay.EVENING,
        TimeOfDay.NIGHT,
    ]
    assert day0[1].activities == ("Visit Sight 2", "Attend: Jazz Night (19:00)")


def test_unknown_place_is_not_found(orchestrator, geocoder, full_providers, adult_profile):
    response = orchestrator.process_query(
        "What's the weather in Unknownzzzplace123", adult_profile
    )

    assert not response.success
    assert response.error == PLACE_NOT_FOUND_MESSAGE
    assert response.geocoding is not None
    assert response.geocoding.primary is None
    assert geocoder.calls[0][0] == "Unknownzzzplace123"
    assert all(provider.calls == [] for provider in full_providers.values())


def test_query_without_place(orchestrator, geocoder, adult_profile):
    response = orchestrator.process_query("What is the weather like?", adult_profile)

    assert not response.success
    assert response.error == PLACE_NOT_FOUND_MESSAGE
    assert geocoder.calls == []


def test_weather_intent_has_no_itinerary(orchestrator, full_providers, adult_profile):
    response = orchestrator.process_query("What's the weather in Paris?", adult_profile)

    assert response.success
    assert response.intent == Intent.WEATHER
    assert response.weather is not None
    assert response.places is None
    assert response.itinerary is None
    assert full_providers["places"].calls == []


def test_personalization_applies_to_response(orchestrator):
    profile = UserProfile(visit_date=date(2025, 6, 1), age_group=AgeGroup.OVER_60)
    response = orchestrator.process_query("I'm going to Paris, let's plan my trip", profile)

    assert response.places.pubs == ()
    assert TimeOfDay.NIGHT not in {s.time for s in response.itinerary}


def test_unexpected_error_returns_generic_message(adult_profile):
    extractor = MagicMock()
    extractor.extract.side_effect = RuntimeError("boom")
    orchestrator = TourismOrchestrator(
        intent_extractor=extractor,
        geocode_resolver=MagicMock(),
        provider_fanout=MagicMock(),
    )

    response = orchestrator.process_query("anything", adult_profile)

    assert not response.success
    assert response.error == GENERIC_ERROR_MESSAGE


def test_fanout_failure_returns_generic_message(orchestrator, adult_profile):
    orchestrator.provider_fanout = MagicMock()
    orchestrator.provider_fanout.fanout.side_effect = RuntimeError("pool exploded")

    response = orchestrator.process_query("I'm going to Paris, let's plan my trip", adult_profile)

    assert not response.success
    assert response.error == GENERIC_ERROR_MESSAGE


def test_process_builds_profile_from_raw_values(orchestrator):
    response = orchestrator.process(
        "I'm going to Paris, let's plan my trip",
        visit_date="2025-06-01",
        age_group="26-40",
        visit_date_end="2025-06-02",
        personas=["Family"],
    )

    assert response.success
    assert response.places.pubs == ()
    assert {s.date for s in response.itinerary} == {"2025-06-01", "2025-06-02"}


@pytest.mark.parametrize(
    "visit_date, visit_date_end",
    [("2025-06-05", "2025-06-01"), ("not a date at all zz", None)],
)
def test_process_bad_dates_give_generic_error(
    orchestrator, geocoder, full_providers, visit_date, visit_date_end
):
    response = orchestrator.process(
        "I'm going to Paris, let's plan my trip",
        visit_date=visit_date,
        visit_date_end=visit_date_end,
    )

    assert not response.success
    assert response.error == GENERIC_ERROR_MESSAGE
    assert geocoder.calls == []
    assert all(not p.calls for p in full_providers.values())


def test_response_renders_camel_case(orchestrator, adult_profile):
    payload = orchestrator.process_query(
        "I'm going to Paris, let's plan my trip", adult_profile
    ).to_dict()

    assert payload["success"] is True
    assert payload["placeName"] == "Paris, France"
    assert payload["intent"] == "full"
    assert payload["places"]["hiddenGems"][0]["name"] == "Quiet Garden"
    assert payload["places"]["hiddenGems"][0]["category"] == "hidden-gem"
    assert payload["events"]["hasData"] is True
    assert payload["itinerary"][0]["time"] == "morning"
    assert payload["itinerary"][0]["travelTime"] == "15-20 min walking"
    assert "error" not in payload
