"""Provider fan-out service.

Calls the data providers an intent asks for concurrently, waits for every
branch to settle, and assembles a ProviderResults. A branch that raises,
returns None, or has no provider bound leaves its field as None; the
other branches are unaffected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ..concurrency import gather_settled
from ..config import FanoutConfig, get_config
from ..domain.models import (
    GeocodingCandidate,
    Intent,
    PlaceCategory,
    PlaceRecord,
    PlacesResult,
    ProviderResults,
    UserProfile,
)
from ..ports.providers import (
    EventsProviderPort,
    HelplineProviderPort,
    PlacesProviderPort,
    ProviderContext,
    RentalProviderPort,
    TransportProviderPort,
    WeatherProviderPort,
)

WEATHER = "weather"
PLACES = "places"
EVENTS = "events"
TRANSPORT = "transport"
RENTALS = "rentals"
HELPLINES = "helplines"

# Which fan-out branches each intent calls.
BRANCHES_BY_INTENT: Dict[Intent, tuple[str, ...]] = {
    Intent.WEATHER: (WEATHER,),
    Intent.PLACES: (PLACES,),
    Intent.BOTH: (WEATHER, PLACES),
    Intent.FULL: (WEATHER, PLACES, EVENTS, TRANSPORT, RENTALS, HELPLINES),
}

MAX_ATTRACTIONS = 5
MAX_HIDDEN_GEMS = 5
MAX_RESTAURANTS = 10
MAX_PUBS = 10
MAX_CINEMAS = 5
MAX_RENTALS = 10

HIDDEN_GEM_POPULARITY = 0.5


def aggregate_places(records: Iterable[PlaceRecord], place_name: str) -> PlacesResult:
    """Partition a flat place list by category.

    Attractions without a popularity score, or scoring below 0.5, are
    re-labelled as hidden gems. Provider order is kept within each
    category and every category is capped.

    Args:
        records: Places as returned by the places provider.
        place_name: Display name of the resolved place.

    Returns:
        PlacesResult with capped category tuples.
    """
    buckets: Dict[PlaceCategory, List[PlaceRecord]] = {
        category: [] for category in PlaceCategory
    }

    for record in records:
        if record.category in (PlaceCategory.ATTRACTION, PlaceCategory.HIDDEN_GEM):
            if record.popularity is None or record.popularity < HIDDEN_GEM_POPULARITY:
                buckets[PlaceCategory.HIDDEN_GEM].append(
                    replace(record, category=PlaceCategory.HIDDEN_GEM)
                )
            else:
                buckets[PlaceCategory.ATTRACTION].append(
                    replace(record, category=PlaceCategory.ATTRACTION)
                )
        else:
            buckets[record.category].append(record)

    return PlacesResult(
        place_name=place_name,
        attractions=tuple(buckets[PlaceCategory.ATTRACTION][:MAX_ATTRACTIONS]),
        hidden_gems=tuple(buckets[PlaceCategory.HIDDEN_GEM][:MAX_HIDDEN_GEMS]),
        restaurants=tuple(buckets[PlaceCategory.RESTAURANT][:MAX_RESTAURANTS]),
        pubs=tuple(buckets[PlaceCategory.PUB][:MAX_PUBS]),
        cinemas=tuple(buckets[PlaceCategory.CINEMA][:MAX_CINEMAS]),
        rentals=tuple(buckets[PlaceCategory.RENTAL][:MAX_RENTALS]),
    )


@dataclass
class ProviderFanout:
    """Concurrent, failure-isolated provider dispatch.

    Every provider is optional; an unbound provider yields None.

    Attributes:
        weather: Weather and safety provider
        places: Points-of-interest provider (flat record list)
        events: Local events provider
        transport: Metro and traffic provider
        rentals: Vehicle rental provider
        helplines: Emergency helpline provider
        config: Fan-out configuration (pool size)
    """

    weather: Optional[WeatherProviderPort] = None
    places: Optional[PlacesProviderPort] = None
    events: Optional[EventsProviderPort] = None
    transport: Optional[TransportProviderPort] = None
    rentals: Optional[RentalProviderPort] = None
    helplines: Optional[HelplineProviderPort] = None
    config: FanoutConfig = field(default_factory=lambda: get_config().fanout)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _branch_calls(
        self, intent: Intent, candidate: GeocodingCandidate, context: ProviderContext
    ) -> Dict[str, Callable[[], Any]]:
        location = candidate.location
        calls: Dict[str, Callable[[], Any]] = {}

        for branch in BRANCHES_BY_INTENT[intent]:
            provider = getattr(self, branch)
            if provider is None:
                self._logger.debug("No provider bound", extra={"branch": branch})
                continue
            if branch == PLACES:
                calls[branch] = lambda p=provider: self._fetch_places(p, location, context)
            else:
                calls[branch] = lambda p=provider: p.fetch(location, context)

        return calls

    @staticmethod
    def _fetch_places(
        provider: PlacesProviderPort, location: Any, context: ProviderContext
    ) -> Optional[PlacesResult]:
        records: Optional[Sequence[PlaceRecord]] = provider.fetch(location, context)
        if records is None:
            return None
        return aggregate_places(records, context.place_name)

    def fanout(
        self, candidate: GeocodingCandidate, intent: Intent, profile: UserProfile
    ) -> ProviderResults:
        """Fetch every provider the intent asks for, concurrently.

        Args:
            candidate: Resolved place.
            intent: Requested information category.
            profile: Traveller profile (dates and age group).

        Returns:
            ProviderResults; a field is None when its branch was not
            called, has no provider, failed, or returned nothing.
        """
        context = ProviderContext(
            place_name=candidate.display_name,
            country=candidate.country,
            visit_date=profile.visit_date,
            visit_date_end=profile.end_date,
            age_group=profile.age_group,
        )

        calls = self._branch_calls(intent, candidate, context)
        self._logger.info(
            "Fanning out to providers",
            extra={"intent": intent.value, "branches": sorted(calls)},
        )

        outcomes = gather_settled(calls, max_workers=self.config.max_workers)

        values: Dict[str, Any] = {}
        for name, outcome in outcomes.items():
            if not outcome.ok:
                self._logger.warning(
                    "Provider failed",
                    extra={"branch": name, "error": repr(outcome.error)},
                )
                continue
            if outcome.value is None:
                self._logger.warning("Provider returned no data", extra={"branch": name})
                continue
            values[name] = outcome.value

        return ProviderResults(**values)
