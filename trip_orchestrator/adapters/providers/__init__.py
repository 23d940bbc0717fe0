"""Provider adapters - Concrete data providers for the fan-out.

Available implementations:
- HelplineDirectoryAdapter: Offline emergency-number directory
"""

from .helpline_directory import HelplineDirectoryAdapter

__all__ = ["HelplineDirectoryAdapter"]
