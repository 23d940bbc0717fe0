"""Offline emergency-helpline directory.

Static emergency numbers for a handful of countries plus a generic
tourism helpline entry. The country is taken from the provider context
(the last segment of the resolved display name); unknown countries fall
back to the US numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from ...domain.models import GeoLocation, Helpline, HelplineResult
from ...ports.providers import ProviderContext

DEFAULT_COUNTRY_CODE = "US"


def _standard(emergency: str, police: str, medical: str, fire: str) -> Tuple[Helpline, ...]:
    return (
        Helpline(name="Emergency", number=emergency, type="emergency"),
        Helpline(name="Police", number=police, type="police"),
        Helpline(name="Medical", number=medical, type="medical"),
        Helpline(name="Fire", number=fire, type="fire"),
    )


EMERGENCY_NUMBERS: Mapping[str, Tuple[Helpline, ...]] = {
    "US": _standard("911", "911", "911", "911"),
    "IN": _standard("112", "100", "102", "101"),
    "GB": _standard("999", "999", "999", "999"),
    "FR": _standard("112", "17", "15", "18"),
    "DE": _standard("112", "110", "112", "112"),
    "JP": _standard("110", "110", "119", "119"),
    "CN": _standard("110", "110", "120", "119"),
    "AU": _standard("000", "000", "000", "000"),
}

COUNTRY_CODES: Dict[str, str] = {
    "united states": "US",
    "united states of america": "US",
    "usa": "US",
    "india": "IN",
    "united kingdom": "GB",
    "uk": "GB",
    "england": "GB",
    "scotland": "GB",
    "wales": "GB",
    "northern ireland": "GB",
    "france": "FR",
    "germany": "DE",
    "deutschland": "DE",
    "japan": "JP",
    "china": "CN",
    "people's republic of china": "CN",
    "australia": "AU",
}

TOURISM_HELPLINE = Helpline(
    name="Tourism Helpline",
    number="Check local tourism office",
    type="tourism",
    description="Contact local tourism information center for assistance",
)


def country_code_for(country: Optional[str]) -> str:
    """Map a country name or ISO code to a directory key, defaulting to US."""
    if not country:
        return DEFAULT_COUNTRY_CODE
    text = country.strip()
    if text.upper() in EMERGENCY_NUMBERS:
        return text.upper()
    return COUNTRY_CODES.get(text.lower(), DEFAULT_COUNTRY_CODE)


@dataclass
class HelplineDirectoryAdapter:
    """Static helpline directory.

    This adapter implements HelplineProviderPort without network access.

    Attributes:
        directory: Helplines keyed by ISO country code
    """

    directory: Mapping[str, Tuple[Helpline, ...]] = field(
        default_factory=lambda: EMERGENCY_NUMBERS
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def fetch(self, location: GeoLocation, context: ProviderContext) -> HelplineResult:
        """Return the helplines for the context's country.

        Args:
            location: Resolved coordinates (unused, kept for the port shape).
            context: Request context carrying the country name.

        Returns:
            HelplineResult keyed by ISO country code.
        """
        code = country_code_for(context.country)
        if code not in self.directory:
            code = DEFAULT_COUNTRY_CODE

        helplines = tuple(self.directory.get(code, ())) + (TOURISM_HELPLINE,)

        self._logger.debug(
            "Helplines resolved",
            extra={"country": context.country, "code": code, "count": len(helplines)},
        )

        return HelplineResult(country=code, helplines=helplines)
