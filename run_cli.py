"""Standalone CLI entry point.

Connects to the Forgettable server named by FORGETTABLE_URL
(default http://localhost:51000).
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

load_dotenv()

from forgettable.client import ForgettableClient
from forgettable.cli import run_cli
from forgettable.config import ClientConfig
from forgettable.logging_config import log_init

logger = logging.getLogger(__name__)


def main() -> None:
    log_init()
    config = ClientConfig.from_env()

    logger.info("CLI connecting to Forgettable at %s", config.root_url)
    with ForgettableClient.from_config(config) as client:
        run_cli(client)


if __name__ == "__main__":
    main()
