from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from .errors import ValidationError
from .models import ReportWindow

REPORT_TIMEZONE = ZoneInfo("America/New_York")
# Entries before this instant are never reported.
MIN_ENTRY_DATE = datetime(2025, 12, 4, tzinfo=timezone.utc)
DEFAULT_SPECIFIER = "yesterday"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def resolve_report_day(specifier: str | None, now_utc: datetime, tz: ZoneInfo = REPORT_TIMEZONE) -> date:
    """Turn ``today``/``yesterday``/``YYYY-MM-DD`` into a civil date in ``tz``."""
    token = (specifier or "").strip().lower() or DEFAULT_SPECIFIER
    today_local = now_utc.astimezone(tz).date()

    if token == "today":
        return today_local
    if token == "yesterday":
        return today_local - timedelta(days=1)

    if not _DATE_PATTERN.match(token):
        raise ValidationError(f"Invalid report date {specifier!r}; expected today, yesterday or YYYY-MM-DD")
    try:
        return date.fromisoformat(token)
    except ValueError as exc:
        raise ValidationError(f"Invalid report date {specifier!r}; not a calendar date") from exc


def window_for_day(
    day_value: date,
    tz: ZoneInfo = REPORT_TIMEZONE,
    cutoff_utc: datetime = MIN_ENTRY_DATE,
) -> ReportWindow:
    # Both bounds come from local midnights so DST days keep their 23/25 hours.
    start = datetime.combine(day_value, time.min, tzinfo=tz)
    end = datetime.combine(day_value + timedelta(days=1), time.min, tzinfo=tz)

    if start < cutoff_utc:
        start = cutoff_utc.astimezone(tz)
    if start > end:
        end = start

    return ReportWindow(start=start, end=end, day=day_value, label=f"{day_value.month}/{day_value.day}")


def resolve_report_window(
    specifier: str | None,
    now_utc: datetime,
    tz: ZoneInfo = REPORT_TIMEZONE,
    cutoff_utc: datetime = MIN_ENTRY_DATE,
) -> ReportWindow:
    return window_for_day(resolve_report_day(specifier, now_utc, tz), tz, cutoff_utc)
