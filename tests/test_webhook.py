import discord
import pytest

from src.errors import ConfigurationError, UpstreamError
from src.webhook import DiscordWebhook

WEBHOOK_URL = "https://discord.com/api/webhooks/123/abc"


class FakeHttpResponse:
    status = 404
    reason = "Not Found"


class FakeSyncWebhook:
    instances: list["FakeSyncWebhook"] = []

    def __init__(self, url: str) -> None:
        self.url = url
        self.sent: list[tuple[str, dict]] = []
        self.error: Exception | None = None

    @classmethod
    def from_url(cls, url: str) -> "FakeSyncWebhook":
        instance = cls(url)
        cls.instances.append(instance)
        return instance

    def send(self, content: str, **kwargs) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((content, kwargs))


@pytest.fixture(autouse=True)
def fake_sync_webhook(monkeypatch):
    FakeSyncWebhook.instances = []
    monkeypatch.setattr(discord, "SyncWebhook", FakeSyncWebhook)


def test_send_posts_content_without_mentions() -> None:
    DiscordWebhook(WEBHOOK_URL).send("hello")

    webhook = FakeSyncWebhook.instances[0]
    content, kwargs = webhook.sent[0]
    assert webhook.url == WEBHOOK_URL
    assert content == "hello"
    assert "thread" not in kwargs
    assert kwargs["allowed_mentions"].everyone is False


def test_send_targets_thread_when_configured() -> None:
    DiscordWebhook(WEBHOOK_URL, thread_id=987).send("hello")

    _, kwargs = FakeSyncWebhook.instances[0].sent[0]
    assert kwargs["thread"].id == 987


def test_http_error_becomes_upstream_error() -> None:
    delivery = DiscordWebhook(WEBHOOK_URL)
    FakeSyncWebhook.instances[0].error = discord.NotFound(FakeHttpResponse(), "Unknown Webhook")

    with pytest.raises(UpstreamError) as excinfo:
        delivery.send("hello")

    assert excinfo.value.status == 404
    assert excinfo.value.body == "Unknown Webhook"


def test_invalid_url_is_configuration_error(monkeypatch) -> None:
    monkeypatch.undo()

    with pytest.raises(ConfigurationError, match="DISCORD_WEBHOOK"):
        DiscordWebhook("not a webhook url")
