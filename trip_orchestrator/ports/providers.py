"""Data provider ports - one capability interface per provider category.

Every provider takes the resolved location plus a ProviderContext and
returns its typed result, or None when it has nothing to offer. Raising
is allowed: the fan-out isolates each branch and turns a failure into a
None field.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import (
        AgeGroup,
        EventsResult,
        GeoLocation,
        HelplineResult,
        PlaceRecord,
        RentalResult,
        TransportResult,
        WeatherSafetyResult,
    )


@dataclass(frozen=True, slots=True)
class ProviderContext:
    """Request context shared by every provider call.

    Attributes:
        place_name: Display name of the resolved place
        country: Country segment of the display name (may be empty)
        visit_date: First day of the trip
        visit_date_end: Last day of the trip (inclusive)
        age_group: Traveller age bracket, if known
    """

    place_name: str
    country: str
    visit_date: date
    visit_date_end: date
    age_group: Optional[AgeGroup] = None


class WeatherProviderPort(Protocol):
    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[WeatherSafetyResult]:
        """Return current conditions, forecast and safety advice."""
        ...


class PlacesProviderPort(Protocol):
    """Port for points of interest.

    Returns a flat record list; splitting attractions into hidden gems
    is done by the fan-out aggregation, not by the provider.
    """

    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[Sequence[PlaceRecord]]:
        ...


class EventsProviderPort(Protocol):
    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[EventsResult]:
        """Return events between visit_date and visit_date_end."""
        ...


class TransportProviderPort(Protocol):
    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[TransportResult]:
        ...


class RentalProviderPort(Protocol):
    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[RentalResult]:
        ...


class HelplineProviderPort(Protocol):
    def fetch(
        self, location: GeoLocation, context: ProviderContext
    ) -> Optional[HelplineResult]:
        ...
