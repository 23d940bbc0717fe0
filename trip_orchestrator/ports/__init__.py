"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .cache import CachePort
from .geocoding import GeocoderPort
from .nlp import IntentExtractorPort, LanguageModelParserPort
from .providers import (
    EventsProviderPort,
    HelplineProviderPort,
    PlacesProviderPort,
    ProviderContext,
    RentalProviderPort,
    TransportProviderPort,
    WeatherProviderPort,
)

__all__ = [
    # NLP
    "IntentExtractorPort",
    "LanguageModelParserPort",
    # Geocoding
    "GeocoderPort",
    # Providers
    "ProviderContext",
    "WeatherProviderPort",
    "PlacesProviderPort",
    "EventsProviderPort",
    "TransportProviderPort",
    "RentalProviderPort",
    "HelplineProviderPort",
    # Cache
    "CachePort",
]
