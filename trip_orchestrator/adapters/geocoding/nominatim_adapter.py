"""Nominatim geocoder adapter.

This adapter wraps OpenStreetMap Nominatim search through geopy with:
- Configuration injection
- Rate limiting (Nominatim usage policy allows one request per second)
- Translation of geopy failures into GeocodingError

Memoization is not done here; the GeocodeResolver owns the cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from geopy.exc import GeocoderRateLimited, GeocoderServiceError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.errors import GeocodingError
from ...domain.models import GeocodingCandidate


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter with rate limiting.

    This adapter implements GeocoderPort using OpenStreetMap's Nominatim
    search endpoint.

    Attributes:
        config: Geocoding configuration
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)

    _geolocator: Optional[Nominatim] = field(default=None, repr=False)
    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_geocoder(self) -> Any:
        """Get or initialize the geocoder with rate limiting."""
        if self._geocode_fn is not None:
            return self._geocode_fn

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "domain": self.config.domain,
                "timeout": self.config.timeout_seconds,
            },
        )

        self._geolocator = Nominatim(
            user_agent=self.config.user_agent,
            domain=self.config.domain,
            timeout=self.config.timeout_seconds,
        )

        # Failures must surface so the resolver does not memoize them.
        self._geocode_fn = RateLimiter(
            self._geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,
        )

        return self._geocode_fn

    def search(self, query: str, limit: int) -> list[GeocodingCandidate]:
        """Search Nominatim for up to ``limit`` matches.

        Args:
            query: The place name to look up.
            limit: Maximum number of matches.

        Returns:
            Candidates in Nominatim's ranking order; empty if none.

        Raises:
            GeocodingError: If the service is unreachable or rate limited.
        """
        if not query or not query.strip():
            return []

        try:
            geocode_fn = self._get_geocoder()
            locations = geocode_fn(
                query,
                exactly_one=False,
                limit=limit,
                language=self.config.language,
                addressdetails=True,
            )
        except GeocoderRateLimited as e:
            self._logger.warning(
                "Geocode rate limited",
                extra={"query": query, "error": str(e)},
            )
            raise GeocodingError(
                "Nominatim rate limit exceeded",
                cause=e,
                query=query,
                is_rate_limited=True,
            )
        except GeocoderServiceError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": query, "error": str(e)},
            )
            raise GeocodingError("Nominatim request failed", cause=e, query=query)

        if not locations:
            self._logger.debug("Geocode returned no result", extra={"query": query})
            return []

        candidates = []
        for location in locations:
            raw = location.raw or {}
            try:
                importance = float(raw.get("importance") or 0.0)
            except (TypeError, ValueError):
                importance = 0.0
            candidates.append(
                GeocodingCandidate(
                    latitude=float(location.latitude),
                    longitude=float(location.longitude),
                    display_name=str(raw.get("display_name") or location.address or query),
                    importance=importance,
                    place_id=str(raw.get("place_id") or ""),
                )
            )

        self._logger.debug(
            "Geocode success",
            extra={"query": query, "matches": len(candidates)},
        )
        return candidates
