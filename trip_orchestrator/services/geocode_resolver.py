"""Geocode resolver service.

Turns a free-text place name into ranked geocoding candidates:

1. Curated city table (no network call)
2. Geocoding service search
3. Fuzzy suggestions when the service finds nothing

Results are memoized per resolver in the injected cache. Only definitive
answers are stored; a geocoding service failure propagates out of the
cache computation, so nothing is written and the next call retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from rapidfuzz import fuzz, process, utils

from ..adapters.cache.memory_cache import InMemoryCache
from ..config import GeocodingConfig, get_config
from ..domain.errors import GeocodingError
from ..domain.models import GeocodingCandidate, GeocodingResult
from ..nlp.popular_cities import CityAlias, find_city_by_name
from ..ports.cache import CachePort
from ..ports.geocoding import GeocoderPort

CURATED_IMPORTANCE = 0.9


def _normalize(place_name: str) -> str:
    return " ".join(place_name.split())


def _curated_candidate(city: CityAlias) -> GeocodingCandidate:
    return GeocodingCandidate(
        latitude=city.lat,
        longitude=city.lon,
        display_name=city.display_name,
        importance=CURATED_IMPORTANCE,
        place_id=f"popular_{city.name.lower().replace(' ', '_')}",
    )


def rank_candidates(
    query: str, candidates: Sequence[GeocodingCandidate]
) -> List[GeocodingCandidate]:
    """Sort exact substring matches first, then by importance (descending).

    Ties keep the service's own order.
    """
    needle = query.lower()
    return sorted(
        candidates,
        key=lambda c: (needle in c.display_name.lower(), c.importance),
        reverse=True,
    )


def select_candidate(result: GeocodingResult, index: int) -> Optional[GeocodingCandidate]:
    """Return the candidate the user picked, falling back to the primary."""
    if 0 <= index < len(result.candidates):
        return result.candidates[index]
    return result.primary


@dataclass
class GeocodeResolver:
    """Place-name resolution with curated shortcuts and fuzzy suggestions.

    Attributes:
        geocoder: Free-text geocoding service
        cache: Memo of resolved names, keyed by lowercase name
        config: Geocoding configuration (limits and fuzzy cutoff)
    """

    geocoder: GeocoderPort
    cache: CachePort[GeocodingResult] = field(
        default_factory=lambda: InMemoryCache(name="geocode")
    )
    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, place_name: str) -> GeocodingResult:
        """Resolve a place name to ranked candidates.

        Args:
            place_name: Place name as extracted from the query.

        Returns:
            GeocodingResult with a primary when anything matched, or with
            fuzzy suggestions only. Empty on service failure. Never raises.
        """
        cleaned = _normalize(place_name)
        if not cleaned:
            return GeocodingResult.empty()

        key = cleaned.lower()
        try:
            return self.cache.get_or_compute(key, lambda: self._lookup(cleaned))
        except GeocodingError as e:
            self._logger.warning(
                "Geocoding failed, returning empty result",
                extra={
                    "place_name": cleaned,
                    "rate_limited": e.is_rate_limited,
                    "error": str(e),
                },
            )
            return GeocodingResult.empty()
        except Exception as e:
            self._logger.warning(
                "Unexpected geocoding failure, returning empty result",
                extra={"place_name": cleaned, "error": str(e)},
            )
            return GeocodingResult.empty()

    def _lookup(self, cleaned: str) -> GeocodingResult:
        city = find_city_by_name(cleaned)
        if city is not None:
            candidate = _curated_candidate(city)
            self._logger.info(
                "Resolved from curated table",
                extra={"place_name": cleaned, "city": city.name},
            )
            return GeocodingResult(candidates=(candidate,), primary=candidate)

        matches = self.geocoder.search(cleaned, self.config.search_limit)
        if not matches:
            suggestions = self.suggest(cleaned)
            self._logger.info(
                "No geocoding match",
                extra={"place_name": cleaned, "suggestions": list(suggestions)},
            )
            return GeocodingResult(suggestions=suggestions)

        ranked = tuple(rank_candidates(cleaned, matches))
        self._logger.info(
            "Geocoding resolved",
            extra={
                "place_name": cleaned,
                "primary": ranked[0].display_name,
                "candidates": len(ranked),
            },
        )
        return GeocodingResult(candidates=ranked, primary=ranked[0])

    def suggest(self, cleaned: str) -> tuple[str, ...]:
        """Suggest close place names for a query that matched nothing.

        Raises:
            GeocodingError: If the broad search itself failed.
        """
        if len(cleaned) < self.config.fuzzy_min_length:
            return ()

        broad = self.geocoder.search(cleaned, self.config.suggestion_limit)
        if not broad:
            return ()

        scored = process.extract(
            cleaned,
            [c.display_name for c in broad],
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=self.config.fuzzy_min_score,
            limit=len(broad),
        )

        suggestions: List[str] = []
        for _choice, _score, index in scored:
            short_name = broad[index].short_name
            if short_name and short_name not in suggestions:
                suggestions.append(short_name)
            if len(suggestions) >= self.config.max_suggestions:
                break

        return tuple(suggestions)
