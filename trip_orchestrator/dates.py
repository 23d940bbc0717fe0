# dates.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

import dateparser


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Parse a calendar date from an ISO string or free-form date text."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    # ISO prefix covers "2025-06-01" and "2025-06-01T19:00:00Z"
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass

    dt = dateparser.parse(
        text,
        languages=["en"],
        settings={"RETURN_AS_TIMEZONE_AWARE": False},
    )
    return dt.date() if dt else None


def normalize_date(value: Union[str, date, datetime, None]) -> Optional[str]:
    """Return the date as YYYY-MM-DD, or None when it cannot be parsed."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None
