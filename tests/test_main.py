import pytest

from src import main as main_module
from src.errors import UpstreamError


class FakeWebhook:
    sent: list[str] = []

    def __init__(self, url: str, thread_id=None) -> None:
        self.url = url
        self.thread_id = thread_id

    def send(self, content: str) -> None:
        FakeWebhook.sent.append(content)


class EmptyClient:
    def __init__(self, token: str) -> None:
        self.token = token

    def fetch_time_entries(self, window):
        return []


class FailingClient(EmptyClient):
    def fetch_time_entries(self, window):
        raise UpstreamError("Toggl", 401, "unauthorized")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in (
        "TOGGL_TOKEN",
        "DISCORD_WEBHOOK",
        "TOGGL_WORKSPACE_ID",
        "TOGGL_PROJECT_ID",
        "DISCORD_THREAD_ID",
        "REPORT_DATE",
        "DRY_RUN",
        "ROUND_MIN_BUCKET",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main_module, "load_dotenv", lambda: None)
    monkeypatch.setattr(main_module, "DiscordWebhook", FakeWebhook)
    FakeWebhook.sent = []


def set_required_env(monkeypatch) -> None:
    monkeypatch.setenv("TOGGL_TOKEN", "tok")
    monkeypatch.setenv("DISCORD_WEBHOOK", "https://discord.com/api/webhooks/1/abc")
    monkeypatch.setenv("REPORT_DATE", "2025-12-10")


def test_missing_configuration_exits_1(capsys) -> None:
    assert main_module.main() == 1
    assert "TOGGL_TOKEN" in capsys.readouterr().err


def test_invalid_report_date_exits_1(monkeypatch, capsys) -> None:
    set_required_env(monkeypatch)
    monkeypatch.setenv("REPORT_DATE", "someday")
    monkeypatch.setattr(main_module, "TogglClient", EmptyClient)

    assert main_module.main() == 1
    assert "someday" in capsys.readouterr().err


def test_nothing_to_report_exits_0(monkeypatch) -> None:
    set_required_env(monkeypatch)
    monkeypatch.setattr(main_module, "TogglClient", EmptyClient)

    assert main_module.main() == 0
    assert FakeWebhook.sent == []


def test_upstream_failure_exits_1(monkeypatch) -> None:
    set_required_env(monkeypatch)
    monkeypatch.setattr(main_module, "TogglClient", FailingClient)

    assert main_module.main() == 1
