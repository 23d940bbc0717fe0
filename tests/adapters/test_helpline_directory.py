"""Tests for the offline helpline directory."""

from datetime import date

import pytest

from trip_orchestrator.adapters.providers import HelplineDirectoryAdapter
from trip_orchestrator.adapters.providers.helpline_directory import (
    EMERGENCY_NUMBERS,
    country_code_for,
)
from trip_orchestrator.domain.models import GeoLocation
from trip_orchestrator.ports.providers import ProviderContext

LOCATION = GeoLocation(48.8566, 2.3522)


def context(country):
    return ProviderContext(
        place_name="Somewhere",
        country=country,
        visit_date=date(2025, 6, 1),
        visit_date_end=date(2025, 6, 1),
    )


@pytest.mark.parametrize(
    "country, code",
    [
        ("France", "FR"),
        ("United Kingdom", "GB"),
        ("india", "IN"),
        ("JP", "JP"),
        ("Atlantis", "US"),
        ("", "US"),
        (None, "US"),
    ],
)
def test_country_code_for(country, code):
    assert country_code_for(country) == code


def test_france_numbers_plus_tourism_line():
    result = HelplineDirectoryAdapter().fetch(LOCATION, context("France"))

    assert result.country == "FR"
    assert result.has_data
    numbers = {h.type: h.number for h in result.helplines}
    assert numbers["police"] == "17"
    assert numbers["medical"] == "15"
    assert numbers["fire"] == "18"
    assert result.helplines[-1].name == "Tourism Helpline"
    assert result.helplines[-1].type == "tourism"


def test_unknown_country_defaults_to_us():
    result = HelplineDirectoryAdapter().fetch(LOCATION, context("Atlantis"))
    assert result.country == "US"
    assert result.helplines[0].number == "911"


def test_repeated_calls_do_not_grow_the_table():
    adapter = HelplineDirectoryAdapter()
    adapter.fetch(LOCATION, context("Germany"))
    second = adapter.fetch(LOCATION, context("Germany"))

    assert len(second.helplines) == 5
    assert len(EMERGENCY_NUMBERS["DE"]) == 4
