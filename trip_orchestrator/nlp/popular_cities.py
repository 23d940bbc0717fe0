"""Curated table of well-known cities and their aliases.

Lookups against this table short-circuit the geocoding service for the
destinations users ask about most. The table lives in
``trip_orchestrator/data/popular_cities.csv``; aliases are ``|``-separated.
"""

import csv
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

# Shorter keys and aliases ("LA", "DC", "Rio") only match exactly; in the
# containment pass they would match inside unrelated words.
MIN_PARTIAL_MATCH_LENGTH = 4


@dataclass(frozen=True)
class CityAlias:
    """A curated city with its known aliases."""

    key: str
    name: str
    aliases: Tuple[str, ...]
    country: str
    lat: float
    lon: float

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name


@lru_cache(maxsize=1)
def _load_popular_cities() -> Dict[str, CityAlias]:
    """Load the curated city table, keyed by lowercase canonical name."""
    csv_path = Path(__file__).resolve().parents[1] / "data" / "popular_cities.csv"

    cities: Dict[str, CityAlias] = {}
    try:
        with csv_path.open(encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                key = (row.get("key") or "").strip().lower()
                name = (row.get("name") or "").strip()
                if not key or not name:
                    continue
                try:
                    lat = float(row["latitude"])
                    lon = float(row["longitude"])
                except (KeyError, TypeError, ValueError):
                    continue
                aliases = tuple(
                    a.strip() for a in (row.get("aliases") or "").split("|") if a.strip()
                )
                cities[key] = CityAlias(
                    key=key,
                    name=name,
                    aliases=aliases,
                    country=(row.get("country") or "").strip(),
                    lat=lat,
                    lon=lon,
                )
    except OSError:
        return {}

    return cities


def _contains_either_way(a: str, b: str) -> bool:
    if len(a) < MIN_PARTIAL_MATCH_LENGTH or len(b) < MIN_PARTIAL_MATCH_LENGTH:
        return False
    return a in b or b in a


def find_city_by_name(text: str) -> Optional[CityAlias]:
    """Find a curated city by key, then alias, then partial match.

    Matching is case-insensitive. The partial pass accepts the input
    containing a key/alias or being contained in one.

    Examples
    --------
    >>> find_city_by_name("Bengaluru").name
    'Bangalore'
    >>> find_city_by_name("New York City").name
    'New York'
    """
    normalized = " ".join(text.split()).lower()
    if not normalized:
        return None

    cities = _load_popular_cities()

    if normalized in cities:
        return cities[normalized]

    for city in cities.values():
        if any(alias.lower() == normalized for alias in city.aliases):
            return city

    for key, city in cities.items():
        if _contains_either_way(normalized, key):
            return city
        if any(_contains_either_way(normalized, alias.lower()) for alias in city.aliases):
            return city

    return None
