"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        orchestrator = container.resolve(TourismOrchestrator)

        # Testing
        container = Container()
        container.register(GeocoderPort, lambda: StubGeocoder())
        geocoder = container.resolve(GeocoderPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        """Check if a type is registered.

        Args:
            port_type: The type to check.

        Returns:
            True if the type is registered.
        """
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons.

        Call this to completely reset the container.
        """
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        LLM parsers are registered only when their API key is configured.
        Of the data providers only the offline helpline directory ships;
        bind the others by registering the provider port types before
        resolving TourismOrchestrator.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If the fan-out pool size is not positive.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.geocoding import NominatimGeocoderAdapter
        from .adapters.nlp import (
            GeminiParserAdapter,
            OpenAIParserAdapter,
            RuleBasedQueryParser,
        )
        from .adapters.providers import HelplineDirectoryAdapter
        from .domain.errors import ConfigurationError
        from .ports.cache import CachePort
        from .ports.geocoding import GeocoderPort
        from .ports.nlp import IntentExtractorPort, LanguageModelParserPort
        from .ports.providers import (
            EventsProviderPort,
            HelplineProviderPort,
            PlacesProviderPort,
            RentalProviderPort,
            TransportProviderPort,
            WeatherProviderPort,
        )
        from .services import (
            GeocodeResolver,
            IntentExtractionService,
            ProviderFanout,
            TourismOrchestrator,
        )

        config = config or get_config()
        if config.fanout.max_workers < 1:
            raise ConfigurationError(
                f"Fan-out pool size must be positive, got {config.fanout.max_workers}",
                setting_name="TRIP_FANOUT_MAX_WORKERS",
                expected_type="int >= 1",
            )

        container = cls(config=config)

        # Geocode memo, shared by every request
        cache: InMemoryCache[Any] = InMemoryCache(name="geocode")
        container.register(CachePort, lambda: cache)

        # NLP
        def create_parsers() -> tuple[LanguageModelParserPort, ...]:
            parsers: list[LanguageModelParserPort] = []
            if config.nlp.gemini_api_key:
                parsers.append(GeminiParserAdapter(config.nlp))
            if config.nlp.openai_api_key:
                parsers.append(OpenAIParserAdapter(config.nlp))
            return tuple(parsers)

        container.register(LanguageModelParserPort, create_parsers)
        container.register(
            IntentExtractorPort,
            lambda: IntentExtractionService(
                parsers=container.resolve(LanguageModelParserPort),
                fallback=RuleBasedQueryParser(),
            ),
        )

        # Geocoding
        container.register(
            GeocoderPort,
            lambda: NominatimGeocoderAdapter(config.geocoding),
        )
        container.register(
            GeocodeResolver,
            lambda: GeocodeResolver(
                geocoder=container.resolve(GeocoderPort),
                cache=container.resolve(CachePort),
                config=config.geocoding,
            ),
        )

        # Providers
        container.register(HelplineProviderPort, lambda: HelplineDirectoryAdapter())

        def optional(port_type: type[Any]) -> Any:
            if container.is_registered(port_type):
                return container.resolve(port_type)
            return None

        container.register(
            ProviderFanout,
            lambda: ProviderFanout(
                weather=optional(WeatherProviderPort),
                places=optional(PlacesProviderPort),
                events=optional(EventsProviderPort),
                transport=optional(TransportProviderPort),
                rentals=optional(RentalProviderPort),
                helplines=optional(HelplineProviderPort),
                config=config.fanout,
            ),
        )

        # Main service
        def create_orchestrator() -> TourismOrchestrator:
            return TourismOrchestrator(
                intent_extractor=container.resolve(IntentExtractorPort),
                geocode_resolver=container.resolve(GeocodeResolver),
                provider_fanout=container.resolve(ProviderFanout),
            )

        container.register(TourismOrchestrator, create_orchestrator)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
