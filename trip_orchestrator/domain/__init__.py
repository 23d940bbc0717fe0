"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application.
"""

from .errors import (
    ConfigurationError,
    GeocodingError,
    LanguageModelError,
    ProviderError,
    TripPlannerError,
)
from .models import (
    AgeGroup,
    EventRecord,
    EventsResult,
    GeocodingCandidate,
    GeocodingResult,
    GeoLocation,
    Helpline,
    HelplineResult,
    Intent,
    ItinerarySlot,
    MetroStation,
    ParsedInput,
    PlaceCategory,
    PlaceRecord,
    PlacesResult,
    ProviderResults,
    Rental,
    RentalResult,
    TimeOfDay,
    TourismResponse,
    TrafficAdvisory,
    TransportResult,
    TravelPersona,
    UserProfile,
    WeatherConditions,
    WeatherForecast,
    WeatherSafetyResult,
)

__all__ = [
    # Enums
    "Intent",
    "AgeGroup",
    "TravelPersona",
    "PlaceCategory",
    "TimeOfDay",
    # Models
    "GeoLocation",
    "UserProfile",
    "ParsedInput",
    "GeocodingCandidate",
    "GeocodingResult",
    "PlaceRecord",
    "PlacesResult",
    "EventRecord",
    "EventsResult",
    "WeatherConditions",
    "WeatherForecast",
    "WeatherSafetyResult",
    "MetroStation",
    "TrafficAdvisory",
    "TransportResult",
    "Rental",
    "RentalResult",
    "Helpline",
    "HelplineResult",
    "ItinerarySlot",
    "ProviderResults",
    "TourismResponse",
    # Errors
    "TripPlannerError",
    "GeocodingError",
    "LanguageModelError",
    "ProviderError",
    "ConfigurationError",
]
