"""Tourism orchestrator service - Main entry point.

Answers a natural-language trip query end to end:

1. Intent and place-name extraction
2. Geocoding of the place name
3. Concurrent provider fan-out
4. Personalization for the traveller profile
5. Itinerary construction (full-planning intent only)

``process_query`` never raises; every failure is reported through the
response's ``success`` flag and ``error`` message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Union

from ..domain.models import Intent, TourismResponse, UserProfile
from ..nlp.place_extraction import clean_place_name
from ..planning.itinerary import build_itinerary
from ..planning.personalizer import personalize
from ..ports.nlp import IntentExtractorPort
from .geocode_resolver import GeocodeResolver
from .provider_fanout import ProviderFanout

PLACE_NOT_FOUND_MESSAGE = "I'm not sure this place exists."
GENERIC_ERROR_MESSAGE = (
    "An error occurred while processing your query. Please try again."
)

MIN_PLACE_NAME_LENGTH = 2


@dataclass
class TourismOrchestrator:
    """Composes extraction, resolution, fan-out and planning.

    Attributes:
        intent_extractor: Turns the query into a ParsedInput
        geocode_resolver: Resolves the place name to candidates
        provider_fanout: Calls the data providers concurrently
    """

    intent_extractor: IntentExtractorPort
    geocode_resolver: GeocodeResolver
    provider_fanout: ProviderFanout

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def process_query(self, query: str, profile: UserProfile) -> TourismResponse:
        """Answer a trip-planning query for a traveller.

        Args:
            query: Natural-language query, e.g. "I'm going to Paris,
                let's plan my trip".
            profile: Traveller profile (dates, age group, personas).

        Returns:
            TourismResponse; ``success`` is False with a user-facing
            ``error`` when the place cannot be resolved or anything
            unexpected fails.
        """
        try:
            return self._process(query, profile)
        except Exception:
            self._logger.exception(
                "Query processing failed",
                extra={"query_length": len(query or "")},
            )
            return TourismResponse(success=False, error=GENERIC_ERROR_MESSAGE)

    def process(
        self,
        query: str,
        visit_date: Union[str, date],
        age_group: Optional[str] = None,
        visit_date_end: Union[str, date, None] = None,
        personas: Union[str, Iterable[str], None] = None,
    ) -> TourismResponse:
        """Like process_query, but builds the profile from raw values.

        An unparseable or inverted date gives an unsuccessful response
        with the generic error message.
        """
        try:
            profile = UserProfile.from_raw(
                visit_date=visit_date,
                age_group=age_group,
                visit_date_end=visit_date_end,
                personas=personas,
            )
        except ValueError as e:
            self._logger.warning("Invalid traveller profile", extra={"error": str(e)})
            return TourismResponse(success=False, error=GENERIC_ERROR_MESSAGE)
        return self.process_query(query, profile)

    def _process(self, query: str, profile: UserProfile) -> TourismResponse:
        self._logger.info(
            "Processing query",
            extra={"query_length": len(query), "days": profile.num_days},
        )

        # Step 1: Extraction (never raises)
        parsed = self.intent_extractor.extract(query)
        self._logger.info(
            "Query parsed",
            extra={
                "place_name": parsed.place_name,
                "intent": parsed.intent.value,
                "confidence": parsed.confidence,
                "source": parsed.source,
            },
        )

        place_name = clean_place_name(parsed.place_name)
        if len(place_name) < MIN_PLACE_NAME_LENGTH:
            self._logger.info("No usable place name in query")
            return TourismResponse(
                success=False,
                intent=parsed.intent,
                error=PLACE_NOT_FOUND_MESSAGE,
            )

        # Step 2: Geocoding
        geocoding = self.geocode_resolver.resolve(place_name)
        if not geocoding.is_resolved:
            self._logger.info(
                "Place not resolved",
                extra={
                    "place_name": place_name,
                    "suggestions": list(geocoding.suggestions),
                },
            )
            return TourismResponse(
                success=False,
                intent=parsed.intent,
                geocoding=geocoding,
                error=PLACE_NOT_FOUND_MESSAGE,
            )

        primary = geocoding.primary

        # Step 3: Fan-out
        results = self.provider_fanout.fanout(primary, parsed.intent, profile)

        # Step 4: Personalization
        places, events = personalize(
            results.places, results.events, profile.age_group, profile.personas
        )

        # Step 5: Itinerary
        itinerary = None
        if parsed.intent is Intent.FULL:
            itinerary = build_itinerary(
                places,
                events,
                start=profile.visit_date,
                end=profile.end_date,
                age_group=profile.age_group,
            )

        self._logger.info(
            "Query answered",
            extra={
                "place_name": primary.display_name,
                "intent": parsed.intent.value,
                "itinerary_slots": len(itinerary) if itinerary is not None else 0,
            },
        )

        return TourismResponse(
            success=True,
            place_name=primary.display_name,
            intent=parsed.intent,
            geocoding=geocoding,
            weather=results.weather,
            places=places,
            events=events,
            transport=results.transport,
            rentals=results.rentals,
            helplines=results.helplines,
            itinerary=itinerary,
        )
