from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

TRUTHY_VALUES = frozenset({"1", "true", "yes"})


@dataclass(frozen=True, slots=True)
class Config:
    toggl_token: str
    discord_webhook: str
    workspace_id: int | None = None
    thread_id: int | None = None
    project_id: int | None = None
    run_date: str | None = None
    dry_run: bool = False
    round_min_bucket: bool = True


def _optional_env(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _required_env(environ: Mapping[str, str], name: str) -> str:
    value = _optional_env(environ, name)
    if value is None:
        raise ConfigurationError(f"Missing {name} environment variable")
    return value


def _optional_int_env(environ: Mapping[str, str], name: str) -> int | None:
    value = _optional_env(environ, name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {name} environment variable; must be a number") from exc


def _flag_env(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = _optional_env(environ, name)
    if value is None:
        return default
    return value.lower() in TRUTHY_VALUES


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    env = os.environ if environ is None else environ

    return Config(
        toggl_token=_required_env(env, "TOGGL_TOKEN"),
        discord_webhook=_required_env(env, "DISCORD_WEBHOOK"),
        workspace_id=_optional_int_env(env, "TOGGL_WORKSPACE_ID"),
        thread_id=_optional_int_env(env, "DISCORD_THREAD_ID"),
        project_id=_optional_int_env(env, "TOGGL_PROJECT_ID"),
        run_date=_optional_env(env, "REPORT_DATE"),
        dry_run=_flag_env(env, "DRY_RUN", default=False),
        round_min_bucket=_flag_env(env, "ROUND_MIN_BUCKET", default=True),
    )
