"""Planning - pure personalization and itinerary construction.

Nothing here performs I/O; every function returns new immutable objects.
"""

from .itinerary import build_itinerary
from .personalizer import personalize
from .profile_rules import AgeRules, rules_for

__all__ = ["AgeRules", "rules_for", "personalize", "build_itinerary"]
