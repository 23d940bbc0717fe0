"""Typed domain errors for the trip orchestrator.

Adapters translate library exceptions (geopy, requests) into these
types so services can decide explicitly whether to degrade or propagate.

All errors inherit from TripPlannerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TripPlannerError(Exception):
    """Base error for the trip planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GeocodingError(TripPlannerError):
    """The geocoding service could not be reached or answered garbage.

    An empty match list is not an error; this is raised only when the
    service itself failed, so the result must not be memoized.

    Attributes:
        query: The location query that failed
        is_rate_limited: Whether the failure was due to rate limiting
    """

    query: str = ""
    is_rate_limited: bool = False


@dataclass
class LanguageModelError(TripPlannerError):
    """An LLM parser call failed (transport, status code or payload).

    Attributes:
        provider: Name of the LLM provider
        status_code: HTTP status code, when one was received
    """

    provider: str = ""
    status_code: Optional[int] = None


@dataclass
class ProviderError(TripPlannerError):
    """A data provider (weather, places, events, ...) failed.

    Attributes:
        provider: Fan-out branch name of the provider
    """

    provider: str = ""


@dataclass
class ConfigurationError(TripPlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
