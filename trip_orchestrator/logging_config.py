"""Logging setup for command-line use.

Library code only creates module loggers; handlers and levels are applied
here, from ObservabilityConfig, by entry points such as the CLI.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings.

    Args:
        config: Optional override; defaults to the application config.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=config.format, force=True)

    # geopy and urllib3 are chatty at DEBUG
    for noisy in ("urllib3", "geopy"):
        logging.getLogger(noisy).setLevel(max(level, logging.INFO))
