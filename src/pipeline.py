from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Protocol

from .aggregator import EntryAggregator
from .config import Config
from .durations import utc_now
from .models import ReportWindow, TimeEntry
from .reporter import Reporter
from .window import resolve_report_window

logger = logging.getLogger(__name__)


class EntrySource(Protocol):
    def fetch_time_entries(self, window: ReportWindow) -> list[TimeEntry]: ...


class ReportDelivery(Protocol):
    def send(self, content: str) -> None: ...


def filter_entries(entries: Iterable[TimeEntry], config: Config) -> list[TimeEntry]:
    selected = list(entries)
    if config.workspace_id is not None:
        selected = [entry for entry in selected if entry.workspace_id == config.workspace_id]
    if config.project_id is not None:
        selected = [entry for entry in selected if entry.project_id == config.project_id]
    return selected


def run_report(
    config: Config,
    *,
    client: EntrySource,
    delivery: ReportDelivery,
    now_utc: datetime | None = None,
    echo: Callable[[str], object] = print,
) -> bool:
    """Fetch, summarize and deliver one day's report.

    Returns False when there was nothing to report and delivery was skipped.
    """
    now = now_utc or utc_now()
    window = resolve_report_window(config.run_date, now)
    logger.info("Report window %s: %s -> %s", window.label, window.start.isoformat(), window.end.isoformat())

    entries = client.fetch_time_entries(window)
    filtered = filter_entries(entries, config)
    logger.info("Fetched %d time entries, %d after filtering", len(entries), len(filtered))

    if not filtered:
        logger.info("No time entries for %s; skipping Discord post.", window.label)
        return False

    reporter = Reporter(EntryAggregator(now, min_bucket=config.round_min_bucket))
    message = reporter.build_report_content(window, filtered)

    if config.dry_run:
        echo(f"[DRY RUN] Would post message:\n{message}")
        return True

    delivery.send(message)
    logger.info("Posted Toggl summary for %s to Discord", window.label)
    return True
