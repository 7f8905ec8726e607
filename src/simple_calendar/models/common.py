# File: src/simple_calendar/models/common.py

from datetime import datetime
from typing import Optional

# Formats accepted besides plain ISO-8601
_FALLBACK_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M")


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Parse a local ISO timestamp; returns None when it cannot be read."""
    if not date_str:
        return None
    clean_str = date_str.strip()
    try:
        parsed = datetime.fromisoformat(clean_str)
    except ValueError:
        parsed = None
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(clean_str, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    # Stored calendars are naive local time
    return parsed.replace(tzinfo=None)
