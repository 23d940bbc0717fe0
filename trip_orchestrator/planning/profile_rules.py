"""Age-based filtering rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..domain.models import AgeGroup


@dataclass(frozen=True, slots=True)
class AgeRules:
    """What an age bracket should be shown.

    Attributes:
        include_nightlife: Keep pubs, nightlife events and night slots
        child_friendly: Drop adult-only attractions
    """

    include_nightlife: bool
    child_friendly: bool


DEFAULT_RULES = AgeRules(include_nightlife=True, child_friendly=False)

_RULES: Dict[AgeGroup, AgeRules] = {
    AgeGroup.UNDER_18: AgeRules(include_nightlife=False, child_friendly=True),
    AgeGroup.AGE_18_25: DEFAULT_RULES,
    AgeGroup.AGE_26_40: DEFAULT_RULES,
    AgeGroup.AGE_41_60: AgeRules(include_nightlife=False, child_friendly=False),
    AgeGroup.OVER_60: AgeRules(include_nightlife=False, child_friendly=False),
}


def rules_for(age_group: Optional[AgeGroup]) -> AgeRules:
    """Return the rules for an age group; unknown or None gets the defaults."""
    if age_group is None:
        return DEFAULT_RULES
    return _RULES.get(age_group, DEFAULT_RULES)
