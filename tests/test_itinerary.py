"""Tests for the itinerary builder."""

from datetime import date

import pytest

from trip_orchestrator.domain.models import (
    AgeGroup,
    EventRecord,
    EventsResult,
    PlaceCategory,
    PlacesResult,
    TimeOfDay,
)
from trip_orchestrator.planning.itinerary import build_itinerary

from stubs import place

START = date(2025, 6, 1)
END = date(2025, 6, 3)


def make_places(n_attractions=6, n_restaurants=3, gems=(), pubs=()):
    return PlacesResult(
        place_name="Rome, Italy",
        attractions=tuple(
            place(f"A{i}", PlaceCategory.ATTRACTION, popularity=0.9)
            for i in range(n_attractions)
        ),
        hidden_gems=tuple(place(name, PlaceCategory.HIDDEN_GEM) for name in gems),
        restaurants=tuple(
            place(f"R{i}", PlaceCategory.RESTAURANT) for i in range(n_restaurants)
        ),
        pubs=tuple(place(name, PlaceCategory.PUB) for name in pubs),
    )


def slots_for(itinerary, day):
    return [s for s in itinerary if s.date == day.isoformat()]


def test_three_days_without_nightlife():
    itinerary = build_itinerary(make_places(pubs=("P0",)), None, START, END, AgeGroup.OVER_60)

    assert len(itinerary) <= 9
    assert all(s.time is not TimeOfDay.NIGHT for s in itinerary)
    for offset in range(3):
        day = date(2025, 6, 1 + offset)
        times = [s.time for s in slots_for(itinerary, day)]
        assert times == [TimeOfDay.MORNING, TimeOfDay.AFTERNOON, TimeOfDay.EVENING]
    assert all(s.activities for s in itinerary)


def test_day_activities_follow_indices():
    itinerary = build_itinerary(make_places(gems=("G0", "G1")), None, START, END)

    day1 = slots_for(itinerary, date(2025, 6, 2))
    assert day1[0].activities == ("Visit A2", "Explore G1")
    assert day1[0].dining == "R1"
    assert day1[1].activities == ("Visit A3",)
    assert day1[1].dining == "R2"
    assert day1[2].activities == ("Dine at R1", "Visit A4")
    assert day1[2].dining == "R1"


def test_travel_times():
    itinerary = build_itinerary(make_places(pubs=("P0",)), None, START, None, AgeGroup.AGE_26_40)
    assert [(s.time, s.travel_time) for s in itinerary] == [
        (TimeOfDay.MORNING, "15-20 min walking"),
        (TimeOfDay.AFTERNOON, "20-30 min"),
        (TimeOfDay.EVENING, "10-15 min"),
        (TimeOfDay.NIGHT, "10-15 min"),
    ]
    assert itinerary[3].activities == ("Enjoy nightlife at P0",)
    assert itinerary[3].dining is None


def test_end_defaults_to_start():
    itinerary = build_itinerary(make_places(), None, START)
    assert {s.date for s in itinerary} == {"2025-06-01"}


def test_event_on_matching_day():
    events = EventsResult(
        place_name="Rome, Italy",
        events=(
            EventRecord(name="Opera", date="2025-06-02T19:30:00Z", time="19:30"),
            EventRecord(name="Market", date="June 3, 2025"),
            EventRecord(name="Elsewhere", date="2025-07-01"),
        ),
    )
    itinerary = build_itinerary(make_places(), events, START, END)

    afternoon = [s for s in itinerary if s.time is TimeOfDay.AFTERNOON]
    assert afternoon[0].activities == ("Visit A1",)
    assert afternoon[1].activities == ("Visit A3", "Attend: Opera (19:30)")
    assert afternoon[2].activities == ("Visit A5", "Attend: Market")


def test_fallbacks_when_places_run_out():
    itinerary = build_itinerary(make_places(n_attractions=2, n_restaurants=0), None, START, END)

    day2 = slots_for(itinerary, date(2025, 6, 3))
    assert day2[0].activities == ("Visit A0",)
    assert day2[0].dining == "Local breakfast spot"
    assert day2[1].activities == ("Visit A1",)
    assert day2[1].dining == "Local lunch spot"
    assert len(day2) == 2


def test_no_places_no_slots():
    assert build_itinerary(None, None, START, END) == ()


def test_deterministic():
    places = make_places(gems=("G0",), pubs=("P0", "P1"))
    assert build_itinerary(places, None, START, END) == build_itinerary(places, None, START, END)


@pytest.mark.parametrize("age_group", [AgeGroup.UNDER_18, AgeGroup.AGE_41_60, AgeGroup.OVER_60])
def test_no_night_slots_when_nightlife_excluded(age_group):
    itinerary = build_itinerary(make_places(pubs=("P0", "P1", "P2")), None, START, END, age_group)
    assert TimeOfDay.NIGHT not in {s.time for s in itinerary}
