from __future__ import annotations

from collections.abc import Sequence

from .aggregator import EntryAggregator
from .models import ReportWindow, TimeEntry

SEPARATOR_CHAR = "─"


def format_duration(total_seconds: int) -> str:
    """Render seconds as ``1h05``, ``5m30`` or ``45s``."""
    safe_seconds = max(0, int(total_seconds))
    hours, remainder = divmod(safe_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h{minutes:02}"
    if minutes > 0:
        return f"{minutes}m{seconds:02}"
    return f"{seconds}s"


class Reporter:
    def __init__(self, aggregator: EntryAggregator) -> None:
        self.aggregator = aggregator

    def build_body_lines(self, entries: Sequence[TimeEntry]) -> list[str]:
        if not entries:
            return ["• No entries"]

        grouped = self.aggregator.group_by_label(entries)
        lines: list[str] = []
        for label in self.aggregator.summarize_by_label(entries):
            lines.append(f"**{label.name} – {format_duration(label.seconds)}**")
            for item in self.aggregator.summarize_by_description(grouped.get(label.name, [])):
                lines.append(f"• {item.description} – {format_duration(item.seconds)}")

        lines.append("")
        lines.append(f"Total: **{format_duration(self.aggregator.total_seconds(entries))}**")
        return lines

    def build_report_content(self, window: ReportWindow, entries: Sequence[TimeEntry]) -> str:
        header = f"⏱️ **Toggl Summary ({window.label})**"
        body = self.build_body_lines(entries)
        width = max(len(line) for line in [header, *body])
        return "\n".join([header, SEPARATOR_CHAR * width, *body])
