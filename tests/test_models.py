"""Tests for domain models and date parsing."""

from datetime import date, datetime

import pytest

from trip_orchestrator.dates import normalize_date, parse_date
from trip_orchestrator.domain.models import (
    AgeGroup,
    GeocodingCandidate,
    GeoLocation,
    Intent,
    ItinerarySlot,
    ParsedInput,
    TimeOfDay,
    TourismResponse,
    TravelPersona,
    UserProfile,
)


class TestUserProfile:
    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            UserProfile(visit_date=date(2025, 6, 3), visit_date_end=date(2025, 6, 1))

    def test_day_trip(self):
        profile = UserProfile(visit_date=date(2025, 6, 1))
        assert profile.end_date == date(2025, 6, 1)
        assert profile.num_days == 1

    def test_from_raw(self):
        profile = UserProfile.from_raw(
            visit_date="2025-06-01",
            age_group="60+",
            visit_date_end="2025-06-04",
            personas=["family", "Budget", "Family", "Pirate"],
        )
        assert profile.age_group is AgeGroup.OVER_60
        assert profile.num_days == 4
        assert profile.personas == (TravelPersona.FAMILY, TravelPersona.BUDGET)

    def test_from_raw_unknown_age_group_is_none(self):
        profile = UserProfile.from_raw(visit_date="2025-06-01", age_group="toddler")
        assert profile.age_group is None

    def test_from_raw_single_persona_string(self):
        profile = UserProfile.from_raw(visit_date=date(2025, 6, 1), personas="Romantic")
        assert profile.personas == (TravelPersona.ROMANTIC,)

    def test_from_raw_bad_date(self):
        with pytest.raises(ValueError):
            UserProfile.from_raw(visit_date="xyzzy-not-a-date")


class TestEnums:
    def test_intent_parse(self):
        assert Intent.parse(" Weather ") is Intent.WEATHER
        assert Intent.parse("shopping") is None
        assert Intent.parse(None) is None

    def test_age_group_parse(self):
        assert AgeGroup.parse("under-18") is AgeGroup.UNDER_18
        assert AgeGroup.parse("99") is None


def test_geo_location_validates_ranges():
    with pytest.raises(ValueError):
        GeoLocation(latitude=91, longitude=0)
    with pytest.raises(ValueError):
        GeoLocation(latitude=0, longitude=-181)


def test_parsed_input_clamps_confidence():
    assert ParsedInput("Paris", Intent.FULL, 1.7).confidence == 1.0
    assert ParsedInput("Paris", Intent.FULL, -0.2).confidence == 0.0


def test_candidate_name_segments():
    c = GeocodingCandidate(
        latitude=1.0,
        longitude=2.0,
        display_name="Springfield, Sangamon County, Illinois, United States",
        importance=0.5,
        place_id="9",
    )
    assert c.short_name == "Springfield"
    assert c.country == "United States"
    assert c.location == GeoLocation(1.0, 2.0)


def test_response_to_dict_omits_none():
    response = TourismResponse(
        success=True,
        place_name="Paris, France",
        intent=Intent.FULL,
        itinerary=(
            ItinerarySlot(
                date="2025-06-01",
                time=TimeOfDay.MORNING,
                activities=("Visit Louvre",),
                travel_time="15-20 min walking",
            ),
        ),
    )
    assert response.to_dict() == {
        "success": True,
        "placeName": "Paris, France",
        "intent": "full",
        "itinerary": [
            {
                "date": "2025-06-01",
                "time": "morning",
                "activities": ["Visit Louvre"],
                "travelTime": "15-20 min walking",
            }
        ],
    }


class TestDates:
    def test_iso_and_timestamp(self):
        assert parse_date("2025-06-01") == date(2025, 6, 1)
        assert parse_date("2025-06-01T19:00:00Z") == date(2025, 6, 1)

    def test_free_form(self):
        assert normalize_date("June 3, 2025") == "2025-06-03"

    def test_passthrough_and_empty(self):
        assert parse_date(datetime(2025, 6, 1, 12, 0)) == date(2025, 6, 1)
        assert parse_date(date(2025, 6, 1)) == date(2025, 6, 1)
        assert parse_date(None) is None
        assert normalize_date("   ") is None
