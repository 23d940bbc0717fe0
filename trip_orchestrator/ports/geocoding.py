"""Geocoding port - Abstraction for free-text place search.

This protocol defines the contract for geocoding services, allowing
different implementations (Nominatim, Google Maps, test stubs) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GeocodingCandidate


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def search(self, query: str, limit: int) -> Sequence[GeocodingCandidate]:
        """Search for places matching a free-text query.

        Args:
            query: The place name to look up (e.g., "Paris", "Bengaluru").
            limit: Maximum number of matches to return.

        Returns:
            Matches in the service's own ranking order; empty if none.

        Raises:
            GeocodingError: If the service failed (network, bad payload).
        """
        ...
