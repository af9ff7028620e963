from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class TimeEntry:
    duration: int | None
    start: str | None
    tags: tuple[str, ...] = ()
    description: str | None = None
    project_id: int | None = None
    workspace_id: int | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> TimeEntry:
        duration = payload.get("duration")
        # bool is an int subclass; neither it nor floats are valid durations.
        if not isinstance(duration, int) or isinstance(duration, bool):
            duration = None

        raw_tags = payload.get("tags") or []
        tags = tuple(dict.fromkeys(str(tag) for tag in raw_tags))

        return cls(
            duration=duration,
            start=payload.get("start"),
            tags=tags,
            description=payload.get("description"),
            project_id=payload.get("project_id"),
            workspace_id=payload.get("workspace_id"),
        )


@dataclass(frozen=True, slots=True)
class LabelTotal:
    name: str
    seconds: int


@dataclass(frozen=True, slots=True)
class DescriptionTotal:
    description: str
    seconds: int


@dataclass(frozen=True, slots=True)
class ReportWindow:
    start: datetime
    end: datetime
    day: date
    label: str

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end
