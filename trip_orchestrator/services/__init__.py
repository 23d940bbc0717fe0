"""Services layer - Application orchestration.

This module contains the main application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- TourismOrchestrator: Main service answering trip-planning queries
- IntentExtractionService: Query parsing with LLM-to-rules fallback
- GeocodeResolver: Place-name resolution with curated shortcuts
- ProviderFanout: Concurrent, failure-isolated provider dispatch
"""

from .geocode_resolver import GeocodeResolver
from .intent_extractor import IntentExtractionService
from .provider_fanout import ProviderFanout
from .tourism_orchestrator import TourismOrchestrator

__all__ = [
    "TourismOrchestrator",
    "IntentExtractionService",
    "GeocodeResolver",
    "ProviderFanout",
]
