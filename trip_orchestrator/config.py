"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
LLM parser credentials, geocoding transport settings, fan-out sizing
and logging.

Configuration can be overridden via environment variables:
- TRIP_NLP_GEMINI_API_KEY=...
- TRIP_NLP_OPENAI_API_KEY=...
- TRIP_GEO_USER_AGENT=my-app/1.0
- TRIP_FANOUT_MAX_WORKERS=8
- TRIP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IntentConfig(BaseSettings):
    """LLM-backed intent parsing configuration.

    Environment variables prefixed with TRIP_NLP_. A parser is only
    wired when its API key is set.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_NLP_")

    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-pro"
    gemini_url: str = "https://generativelanguage.googleapis.com/v1beta/models"

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-3.5-turbo"
    openai_url: str = "https://api.openai.com/v1/chat/completions"

    request_timeout_seconds: float = 15.0
    temperature: float = 0.3
    max_tokens: int = 150


class GeocodingConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with TRIP_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_GEO_")

    user_agent: str = "Tourism-Multi-Agent-System/1.0"
    domain: str = "nominatim.openstreetmap.org"
    language: str = "en"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0

    search_limit: int = 5
    suggestion_limit: int = 10
    max_suggestions: int = 3
    fuzzy_min_score: float = 60.0
    fuzzy_min_length: int = 3


class FanoutConfig(BaseSettings):
    """Provider fan-out configuration.

    Environment variables prefixed with TRIP_FANOUT_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_FANOUT_")

    max_workers: int = 6


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRIP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.geocoding.user_agent)
        print(config.fanout.max_workers)

    Environment variables prefixed with TRIP_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_")

    nlp: IntentConfig = Field(default_factory=IntentConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    fanout: FanoutConfig = Field(default_factory=FanoutConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
