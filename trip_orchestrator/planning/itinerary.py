"""Deterministic time-sliced itinerary builder.

Each day of the trip gets up to four slots (morning, afternoon, evening,
night) filled from the personalized places and that day's events. The
same inputs always produce the same itinerary.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

from ..dates import normalize_date
from ..domain.models import (
    AgeGroup,
    EventRecord,
    EventsResult,
    ItinerarySlot,
    PlaceRecord,
    PlacesResult,
    TimeOfDay,
)
from .profile_rules import rules_for

BREAKFAST_FALLBACK = "Local breakfast spot"
LUNCH_FALLBACK = "Local lunch spot"
DINNER_FALLBACK = "Local dinner spot"

MORNING_TRAVEL = "15-20 min walking"
AFTERNOON_TRAVEL = "20-30 min"
EVENING_TRAVEL = "10-15 min"
NIGHT_TRAVEL = "10-15 min"


def _name_at(records: Sequence[PlaceRecord], index: int) -> Optional[str]:
    if 0 <= index < len(records):
        return records[index].name
    return None


def _events_on(events: Optional[EventsResult], day: date) -> List[EventRecord]:
    if events is None:
        return []
    wanted = day.isoformat()
    return [e for e in events.events if e.date and normalize_date(e.date) == wanted]


def _describe_event(event: EventRecord) -> str:
    if event.time:
        return f"Attend: {event.name} ({event.time})"
    return f"Attend: {event.name}"


def build_itinerary(
    places: Optional[PlacesResult],
    events: Optional[EventsResult],
    start: date,
    end: Optional[date] = None,
    age_group: Optional[AgeGroup] = None,
) -> tuple[ItinerarySlot, ...]:
    """Build the itinerary for every day from ``start`` to ``end`` inclusive.

    Day ``i`` uses attractions ``2i`` and ``2i+1`` (plus ``2i+2`` in the
    evening), hidden gem ``i``, restaurants around index ``i`` and pub
    ``i``. Slots with no activity are left out.

    Args:
        places: Personalized places, or None.
        events: Personalized events, or None.
        start: First day of the trip.
        end: Last day (inclusive); defaults to ``start``.
        age_group: Decides whether night slots are offered.

    Returns:
        Slots ordered by date, then morning, afternoon, evening, night.
    """
    end = end or start
    rules = rules_for(age_group)

    attractions = places.attractions if places else ()
    hidden_gems = places.hidden_gems if places else ()
    restaurants = places.restaurants if places else ()
    pubs = places.pubs if places else ()

    slots: List[ItinerarySlot] = []
    num_days = (end - start).days + 1

    for i in range(num_days):
        day = start + timedelta(days=i)
        date_str = day.isoformat()
        day_events = _events_on(events, day)

        morning: List[str] = []
        attraction = _name_at(attractions, 2 * i)
        if attraction:
            morning.append(f"Visit {attraction}")
        gem = _name_at(hidden_gems, i)
        if gem:
            morning.append(f"Explore {gem}")
        if not morning and attractions:
            morning.append(f"Visit {attractions[0].name}")

        afternoon: List[str] = []
        attraction = _name_at(attractions, 2 * i + 1)
        if attraction:
            afternoon.append(f"Visit {attraction}")
        if day_events:
            afternoon.append(_describe_event(day_events[0]))
        if not afternoon and len(attractions) > 1:
            afternoon.append(f"Visit {attractions[1].name}")

        evening: List[str] = []
        restaurant = _name_at(restaurants, i)
        if restaurant:
            evening.append(f"Dine at {restaurant}")
        attraction = _name_at(attractions, 2 * i + 2)
        if attraction:
            evening.append(f"Visit {attraction}")

        night: List[str] = []
        pub = _name_at(pubs, i)
        if rules.include_nightlife and pub:
            night.append(f"Enjoy nightlife at {pub}")

        if morning:
            slots.append(
                ItinerarySlot(
                    date=date_str,
                    time=TimeOfDay.MORNING,
                    activities=tuple(morning),
                    dining=_name_at(restaurants, i) or BREAKFAST_FALLBACK,
                    travel_time=MORNING_TRAVEL,
                )
            )
        if afternoon:
            slots.append(
                ItinerarySlot(
                    date=date_str,
                    time=TimeOfDay.AFTERNOON,
                    activities=tuple(afternoon),
                    dining=(
                        _name_at(restaurants, i + 1)
                        or _name_at(restaurants, 0)
                        or LUNCH_FALLBACK
                    ),
                    travel_time=AFTERNOON_TRAVEL,
                )
            )
        if evening:
            slots.append(
                ItinerarySlot(
                    date=date_str,
                    time=TimeOfDay.EVENING,
                    activities=tuple(evening),
                    dining=(
                        _name_at(restaurants, i + 2)
                        or _name_at(restaurants, i)
                        or DINNER_FALLBACK
                    ),
                    travel_time=EVENING_TRAVEL,
                )
            )
        if night:
            slots.append(
                ItinerarySlot(
                    date=date_str,
                    time=TimeOfDay.NIGHT,
                    activities=tuple(night),
                    travel_time=NIGHT_TRAVEL,
                )
            )

    return tuple(slots)
