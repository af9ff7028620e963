from __future__ import annotations

import discord

from .errors import ConfigurationError, UpstreamError


class DiscordWebhook:
    """Posts report text to a Discord channel, or a thread inside it."""

    def __init__(self, url: str, thread_id: int | None = None) -> None:
        try:
            self._webhook = discord.SyncWebhook.from_url(url)
        except ValueError as exc:
            raise ConfigurationError("Invalid DISCORD_WEBHOOK environment variable; not a webhook URL") from exc
        self.thread_id = thread_id

    def send(self, content: str) -> None:
        # Never ping users in automated summaries.
        kwargs = {"allowed_mentions": discord.AllowedMentions.none()}
        if self.thread_id is not None:
            kwargs["thread"] = discord.Object(id=self.thread_id)

        try:
            self._webhook.send(content, **kwargs)
        except discord.HTTPException as exc:
            raise UpstreamError("Discord", exc.status, exc.text) from exc
