from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from .config import load_config
from .errors import ConfigurationError, ValidationError
from .pipeline import run_report
from .toggl import TogglClient
from .webhook import DiscordWebhook

logger = logging.getLogger("toggl-digest")


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main() -> int:
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
        delivery = DiscordWebhook(config.discord_webhook, thread_id=config.thread_id)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1

    client = TogglClient(config.toggl_token)

    try:
        run_report(config, client=client, delivery=delivery)
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Toggl summary run failed")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
