from __future__ import annotations

from datetime import datetime, timezone

from .models import TimeEntry

ROUNDING_BUCKET_SECONDS = 300


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_iso_utc(value: str | None) -> datetime | None:
    """Parse an ISO timestamp and normalize to UTC."""
    if not value:
        return None

    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        # Toggl always sends offsets; treat naive values as UTC.
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def entry_duration_seconds(entry: TimeEntry | None, now_utc: datetime) -> int:
    """Return the tracked seconds for an entry.

    Finished entries carry an authoritative non-negative ``duration``. Running
    entries report a negative or missing duration, so their length is measured
    from ``start`` up to ``now_utc``.
    """
    if entry is None:
        return 0
    if entry.duration is not None and entry.duration >= 0:
        return entry.duration

    try:
        started = parse_iso_utc(entry.start)
    except ValueError:
        return 0
    if started is None:
        return 0

    elapsed = int((now_utc.astimezone(timezone.utc) - started).total_seconds())
    return max(0, elapsed)


def round_to_bucket(seconds: int, *, min_bucket: bool = True) -> int:
    """Round to the nearest 5 minutes, half up.

    With ``min_bucket`` any positive duration reports as at least one bucket.
    """
    if seconds <= 0:
        return 0

    half = ROUNDING_BUCKET_SECONDS // 2
    rounded = (seconds + half) // ROUNDING_BUCKET_SECONDS * ROUNDING_BUCKET_SECONDS
    if min_bucket:
        return max(ROUNDING_BUCKET_SECONDS, rounded)
    return rounded
