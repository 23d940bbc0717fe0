"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- LLM query parsers (Gemini, OpenAI) and the rule-based parser
- Geocoding services (Nominatim)
- Data providers (offline helpline directory)
- Caching systems (in-memory, null)
"""
