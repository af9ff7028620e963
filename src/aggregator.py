from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .durations import entry_duration_seconds, round_to_bucket, utc_now
from .models import DescriptionTotal, LabelTotal, TimeEntry

NO_LABEL = "(no label)"
NO_DESCRIPTION = "No description"


def entry_labels(entry: TimeEntry) -> tuple[str, ...]:
    return entry.tags or (NO_LABEL,)


def _ranked(totals: dict[str, int]) -> list[tuple[str, int]]:
    # sorted() is stable, so ties keep first-seen insertion order.
    return sorted(totals.items(), key=lambda item: -item[1])


class EntryAggregator:
    """Rounded per-label and per-description totals for one report run."""

    def __init__(self, now_utc: datetime | None = None, *, min_bucket: bool = True) -> None:
        self.now_utc = now_utc or utc_now()
        self.min_bucket = min_bucket

    def rounded_seconds(self, entry: TimeEntry) -> int:
        return round_to_bucket(entry_duration_seconds(entry, self.now_utc), min_bucket=self.min_bucket)

    def summarize_by_label(self, entries: Iterable[TimeEntry]) -> list[LabelTotal]:
        # Multi-tag entries count in full under every tag they carry.
        totals: dict[str, int] = {}
        for entry in entries:
            seconds = self.rounded_seconds(entry)
            for label in entry_labels(entry):
                totals[label] = totals.get(label, 0) + seconds
        return [LabelTotal(name=name, seconds=seconds) for name, seconds in _ranked(totals)]

    def group_by_label(self, entries: Iterable[TimeEntry]) -> dict[str, list[TimeEntry]]:
        grouped: dict[str, list[TimeEntry]] = {}
        for entry in entries:
            for label in entry_labels(entry):
                grouped.setdefault(label, []).append(entry)
        return grouped

    def summarize_by_description(self, entries: Iterable[TimeEntry]) -> list[DescriptionTotal]:
        totals: dict[str, int] = {}
        for entry in entries:
            description = entry.description or NO_DESCRIPTION
            totals[description] = totals.get(description, 0) + self.rounded_seconds(entry)
        return [DescriptionTotal(description=name, seconds=seconds) for name, seconds in _ranked(totals)]

    def total_seconds(self, entries: Iterable[TimeEntry]) -> int:
        # Summed per entry, not per label, so multi-tag entries count once.
        return sum(self.rounded_seconds(entry) for entry in entries)
