"""Profile-driven filtering of places and events.

Age rules apply first, then each selected persona in selection order.
Inputs are never mutated; filtered copies are returned.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from ..domain.models import (
    AgeGroup,
    EventsResult,
    PlacesResult,
    TravelPersona,
)
from .profile_rules import rules_for

logger = logging.getLogger(__name__)

BUDGET_MAX_ATTRACTIONS = 5
NIGHTLIFE_EVENT_WORDS = ("nightlife", "party")


def _contains(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def personalize_places(
    places: Optional[PlacesResult],
    age_group: Optional[AgeGroup],
    personas: Sequence[TravelPersona] = (),
) -> Optional[PlacesResult]:
    """Filter places for an age group and a list of personas."""
    if places is None:
        return None

    rules = rules_for(age_group)
    filtered = places

    if not rules.include_nightlife:
        filtered = replace(filtered, pubs=())

    if rules.child_friendly:
        filtered = replace(
            filtered,
            attractions=tuple(
                p for p in filtered.attractions if not _contains(p.type, "adult")
            ),
        )

    for persona in personas:
        if persona is TravelPersona.FAMILY:
            filtered = replace(
                filtered,
                pubs=(),
                restaurants=tuple(
                    r for r in filtered.restaurants if not _contains(r.cuisine, "bar")
                ),
            )
        if persona is TravelPersona.BUDGET:
            filtered = replace(
                filtered, attractions=filtered.attractions[:BUDGET_MAX_ATTRACTIONS]
            )
        # Luxury and the remaining personas do not filter yet.

    return filtered


def personalize_events(
    events: Optional[EventsResult], age_group: Optional[AgeGroup]
) -> Optional[EventsResult]:
    """Drop nightlife and party events when the age rules exclude nightlife."""
    if events is None:
        return None

    if rules_for(age_group).include_nightlife:
        return events

    kept = tuple(
        e
        for e in events.events
        if not any(
            _contains(e.category, word) or _contains(e.name, word)
            for word in NIGHTLIFE_EVENT_WORDS
        )
    )
    return replace(events, events=kept)


def personalize(
    places: Optional[PlacesResult],
    events: Optional[EventsResult],
    age_group: Optional[AgeGroup],
    personas: Sequence[TravelPersona] = (),
) -> Tuple[Optional[PlacesResult], Optional[EventsResult]]:
    """Apply age and persona filters to places and events.

    Args:
        places: Aggregated places, or None when unavailable.
        events: Events, or None when unavailable.
        age_group: Traveller age bracket; None applies the default rules.
        personas: Selected personas, in selection order.

    Returns:
        Tuple of (filtered places, filtered events); None passes through.
    """
    filtered_places = personalize_places(places, age_group, personas)
    filtered_events = personalize_events(events, age_group)

    logger.debug(
        "Personalization applied",
        extra={
            "age_group": age_group.value if age_group else None,
            "personas": [p.value for p in personas],
        },
    )

    return filtered_places, filtered_events
