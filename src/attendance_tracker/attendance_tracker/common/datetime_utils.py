from __future__ import annotations

from datetime import datetime
from typing import Optional


def _parse(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into local wall-clock time.

    Aware values are converted to the local timezone and returned naive;
    naive values are taken as local already. Returns None for empty or
    unparseable input.
    """
    parsed = _parse(value)
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_iso_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Naive values are read as local time. Differences between two results are
    absolute durations, also across a DST change.
    """
    parsed = _parse(value)
    if parsed is None:
        return None
    return parsed.astimezone()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_iso() -> str:
    return now_local().isoformat(timespec="seconds")
