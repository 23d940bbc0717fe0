"""Immutable domain models for the trip orchestrator.

All models are frozen dataclasses with slots. Enumerations carry the
wire strings used by the caller's UI as their values, and
``TourismResponse.to_dict`` renders the camelCase JSON envelope.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Iterable, Optional, Union


class Intent(Enum):
    """Category of information a query asks for."""

    WEATHER = "weather"
    PLACES = "places"
    BOTH = "both"
    FULL = "full"

    @classmethod
    def parse(cls, value: Any) -> Optional[Intent]:
        """Return the intent for a wire string, or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class AgeGroup(Enum):
    UNDER_18 = "under-18"
    AGE_18_25 = "18-25"
    AGE_26_40 = "26-40"
    AGE_41_60 = "41-60"
    OVER_60 = "60+"

    @classmethod
    def parse(cls, value: Any) -> Optional[AgeGroup]:
        """Return the age group for a wire string, or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


class TravelPersona(Enum):
    ADVENTURE = "Adventure"
    FAMILY = "Family"
    ROMANTIC = "Romantic"
    PARTY = "Party"
    BUDGET = "Budget"
    LUXURY = "Luxury"

    @classmethod
    def parse(cls, value: Any) -> Optional[TravelPersona]:
        """Return the persona for a name (case-insensitive), or None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for persona in cls:
            if persona.value.lower() == wanted:
                return persona
        return None


class PlaceCategory(Enum):
    ATTRACTION = "attraction"
    HIDDEN_GEM = "hidden-gem"
    RESTAURANT = "restaurant"
    PUB = "pub"
    CINEMA = "cinema"
    RENTAL = "rental"


class TimeOfDay(Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Traveller preferences passed by value into every request.

    Attributes:
        visit_date: First day of the trip
        age_group: Age bracket, None when not provided
        visit_date_end: Last day of the trip (inclusive), None for a day trip
        personas: Selected travel personas, in selection order
    """

    visit_date: date
    age_group: Optional[AgeGroup] = None
    visit_date_end: Optional[date] = None
    personas: tuple[TravelPersona, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.visit_date_end is not None and self.visit_date_end < self.visit_date:
            raise ValueError(
                f"visit_date_end {self.visit_date_end} is before "
                f"visit_date {self.visit_date}"
            )

    @property
    def end_date(self) -> date:
        """Last day of the trip, defaulting to the visit date."""
        return self.visit_date_end or self.visit_date

    @property
    def num_days(self) -> int:
        return (self.end_date - self.visit_date).days + 1

    @classmethod
    def from_raw(
        cls,
        visit_date: Union[str, date],
        age_group: Optional[str] = None,
        visit_date_end: Union[str, date, None] = None,
        personas: Union[str, Iterable[str], None] = None,
    ) -> UserProfile:
        """Build a profile from loosely-typed request values.

        Unknown age groups become None and unknown personas are dropped.

        Raises:
            ValueError: If a date cannot be parsed or the range is inverted.
        """
        from ..dates import parse_date

        start = parse_date(visit_date)
        if start is None:
            raise ValueError(f"Unparseable visit date: {visit_date!r}")

        end = None
        if visit_date_end:
            end = parse_date(visit_date_end)
            if end is None:
                raise ValueError(f"Unparseable visit end date: {visit_date_end!r}")

        if personas is None:
            raw_personas: Iterable[str] = ()
        elif isinstance(personas, str):
            raw_personas = (personas,)
        else:
            raw_personas = personas

        selected: list[TravelPersona] = []
        for raw in raw_personas:
            persona = TravelPersona.parse(raw)
            if persona is not None and persona not in selected:
                selected.append(persona)

        return cls(
            visit_date=start,
            age_group=AgeGroup.parse(age_group),
            visit_date_end=end,
            personas=tuple(selected),
        )


@dataclass(frozen=True, slots=True)
class ParsedInput:
    """Place name and intent extracted from a query.

    Attributes:
        place_name: Extracted place name, empty when nothing was found
        intent: Requested information category
        confidence: Advisory score in [0, 1]
        source: Name of the extractor that produced this result
    """

    place_name: str
    intent: Intent
    confidence: float
    source: str = "rules"

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence", min(1.0, max(0.0, self.confidence)))


@dataclass(frozen=True, slots=True)
class GeocodingCandidate:
    """One ranked geocoding match."""

    latitude: float
    longitude: float
    display_name: str
    importance: float
    place_id: str

    @property
    def location(self) -> GeoLocation:
        return GeoLocation(latitude=self.latitude, longitude=self.longitude)

    @property
    def short_name(self) -> str:
        """First comma segment of the display name."""
        return self.display_name.split(",")[0].strip()

    @property
    def country(self) -> str:
        """Last comma segment of the display name."""
        return self.display_name.split(",")[-1].strip()


@dataclass(frozen=True, slots=True)
class GeocodingResult:
    """Ranked candidates, the chosen primary, and fallback suggestions.

    A result with a primary never carries suggestions.
    """

    candidates: tuple[GeocodingCandidate, ...] = field(default_factory=tuple)
    primary: Optional[GeocodingCandidate] = None
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_resolved(self) -> bool:
        return self.primary is not None

    @classmethod
    def empty(cls) -> GeocodingResult:
        return cls()


@dataclass(frozen=True, slots=True)
class PlaceRecord:
    """A named, geolocated point of interest."""

    name: str
    type: str
    category: PlaceCategory
    latitude: float
    longitude: float
    description: Optional[str] = None
    cuisine: Optional[str] = None
    opening_hours: Optional[str] = None
    contact: Optional[str] = None
    popularity: Optional[float] = None


@dataclass(frozen=True, slots=True)
class PlacesResult:
    """Places partitioned by category."""

    place_name: str
    attractions: tuple[PlaceRecord, ...] = field(default_factory=tuple)
    hidden_gems: tuple[PlaceRecord, ...] = field(default_factory=tuple)
    restaurants: tuple[PlaceRecord, ...] = field(default_factory=tuple)
    pubs: tuple[PlaceRecord, ...] = field(default_factory=tuple)
    cinemas: tuple[PlaceRecord, ...] = field(default_factory=tuple)
    rentals: tuple[PlaceRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class EventRecord:
    name: str
    date: str
    time: Optional[str] = None
    venue: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EventsResult:
    place_name: str
    events: tuple[EventRecord, ...] = field(default_factory=tuple)
    source: str = "fallback"

    @property
    def has_data(self) -> bool:
        return len(self.events) > 0


@dataclass(frozen=True, slots=True)
class WeatherConditions:
    temperature: float
    precipitation_probability: float
    wind_speed: float
    condition: str
    uv_index: Optional[float] = None


@dataclass(frozen=True, slots=True)
class WeatherForecast:
    date: str
    temperature: float
    precipitation_probability: float
    wind_speed: float
    condition: str
    uv_index: Optional[float] = None


@dataclass(frozen=True, slots=True)
class WeatherSafetyResult:
    """Current conditions, short forecast and derived safety advisories."""

    place_name: str
    current: WeatherConditions
    forecast: tuple[WeatherForecast, ...] = field(default_factory=tuple)
    safety_advice: tuple[str, ...] = field(default_factory=tuple)
    best_time_to_visit: str = ""


@dataclass(frozen=True, slots=True)
class MetroStation:
    name: str
    latitude: float
    longitude: float
    line: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TrafficAdvisory:
    message: str
    severity: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)
    rush_hour_times: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TransportResult:
    place_name: str
    metro_stations: tuple[MetroStation, ...] = field(default_factory=tuple)
    traffic_advisory: Optional[TrafficAdvisory] = None

    @property
    def has_data(self) -> bool:
        return len(self.metro_stations) > 0 or self.traffic_advisory is not None


@dataclass(frozen=True, slots=True)
class Rental:
    name: str
    type: str
    latitude: float
    longitude: float
    contact: Optional[str] = None
    website: Optional[str] = None
    estimated_price: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RentalResult:
    place_name: str
    rentals: tuple[Rental, ...] = field(default_factory=tuple)

    @property
    def has_data(self) -> bool:
        return len(self.rentals) > 0


@dataclass(frozen=True, slots=True)
class Helpline:
    name: str
    number: str
    type: str
    description: Optional[str] = None


@dataclass(frozen=True, slots=True)
class HelplineResult:
    country: str
    helplines: tuple[Helpline, ...] = field(default_factory=tuple)

    @property
    def has_data(self) -> bool:
        return len(self.helplines) > 0


@dataclass(frozen=True, slots=True)
class ItinerarySlot:
    """One itinerary entry for a date and time-of-day bucket."""

    date: str
    time: TimeOfDay
    activities: tuple[str, ...]
    dining: Optional[str] = None
    travel_time: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ProviderResults:
    """Outcome of one fan-out; a None field was skipped or failed."""

    weather: Optional[WeatherSafetyResult] = None
    places: Optional[PlacesResult] = None
    events: Optional[EventsResult] = None
    transport: Optional[TransportResult] = None
    rentals: Optional[RentalResult] = None
    helplines: Optional[HelplineResult] = None


@dataclass(frozen=True, slots=True)
class TourismResponse:
    """Unified result envelope returned to the caller."""

    success: bool
    place_name: Optional[str] = None
    intent: Optional[Intent] = None
    geocoding: Optional[GeocodingResult] = None
    weather: Optional[WeatherSafetyResult] = None
    places: Optional[PlacesResult] = None
    events: Optional[EventsResult] = None
    transport: Optional[TransportResult] = None
    rentals: Optional[RentalResult] = None
    helplines: Optional[HelplineResult] = None
    itinerary: Optional[tuple[ItinerarySlot, ...]] = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase JSON shape, omitting unset fields."""
        return _to_wire(self)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# Computed properties the UI reads alongside the stored fields.
_WIRE_PROPERTIES = ("has_data",)


def _to_wire(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            out[_camel(f.name)] = _to_wire(item)
        for prop in _WIRE_PROPERTIES:
            if hasattr(type(value), prop):
                out[_camel(prop)] = getattr(value, prop)
        return out
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_wire(item) for item in value]
    return value
