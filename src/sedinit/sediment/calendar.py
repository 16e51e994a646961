"""Timestamp parsing for erosion-period bounds.

Model input uses ``MM/DD/YYYY-HH[:MM[:SS]]``; a bare ``MM/DD/YYYY`` means
midnight. ISO 8601 strings are accepted as a fallback when enabled.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from sedinit.contracts.failure import MissingOrMalformedValue


def scan_date(value: str, formats: Sequence[str], allow_iso: bool = True) -> Optional[datetime]:
    """Parse ``value`` with the first matching format, or return None."""
    value = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    if allow_iso and value:
        try:
            when = datetime.fromisoformat(value)
        except ValueError:
            return None
        # naive UTC, comparable with the strptime results
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc).replace(tzinfo=None)
        return when
    return None


def parse_timestamp(value: str, key: str, formats: Sequence[str], allow_iso: bool = True) -> datetime:
    """Like scan_date, but a failure is fatal and names the key."""
    when = scan_date(value, formats, allow_iso)
    if when is None:
        raise MissingOrMalformedValue(key, f"cannot parse date {value!r}")
    return when
