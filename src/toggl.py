from __future__ import annotations

import logging
from datetime import timezone
from typing import Any

import requests

from .errors import UpstreamError
from .models import ReportWindow, TimeEntry

API_BASE = "https://api.track.toggl.com/api/v9"
UNREADABLE_BODY = "<unable to read response>"


def response_text(response: requests.Response) -> str:
    try:
        return response.text
    except requests.RequestException:
        return UNREADABLE_BODY


class TogglClient:
    """Read-only access to the authenticated user's Toggl time entries."""

    def __init__(
        self,
        token: str,
        session: requests.Session | None = None,
        base_url: str = API_BASE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.auth = (token, "api_token")
        self.logger = logger or logging.getLogger(__name__)

    def _get_json(self, path: str, params: dict[str, str]) -> Any:
        response = self.session.get(f"{self.base_url}{path}", params=params, auth=self.auth)
        if not response.ok:
            raise UpstreamError("Toggl", response.status_code, response_text(response))
        if response.status_code == 204:
            return None
        return response.json()

    def fetch_time_entries(self, window: ReportWindow) -> list[TimeEntry]:
        if window.is_empty:
            self.logger.debug("Window %s is empty; not querying Toggl", window.label)
            return []

        params = {
            "start_date": window.start.astimezone(timezone.utc).isoformat(),
            "end_date": window.end.astimezone(timezone.utc).isoformat(),
        }
        payload = self._get_json("/me/time_entries", params) or []
        return [TimeEntry.from_api(item) for item in payload]
