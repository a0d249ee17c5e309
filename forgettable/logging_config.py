"""Logging setup for Forgettable entry points.

Reads a dictConfig JSON file when one can be found, otherwise falls back
to a plain stderr handler. FORGETTABLE_LOG_LEVEL overrides the root level
either way.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def log_init(log_config_path: str | None = None) -> str | None:
    """Configure logging and return the config file used, if any.

    Config path lookup: the argument, then LOG_CONFIG, then logging.json
    in the project root. An explicitly requested file that does not
    exist raises FileNotFoundError; a missing default file does not.
    """
    explicit = log_config_path or os.environ.get("LOG_CONFIG")
    path = explicit or os.path.join(_PROJECT_ROOT, "logging.json")

    if explicit or os.path.exists(path):
        with open(path) as f:
            logging.config.dictConfig(json.load(f))
        used: str | None = path
    else:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_FORMAT)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        used = None

    level = os.environ.get("FORGETTABLE_LOG_LEVEL")
    if level:
        logging.getLogger().setLevel(level.upper())
    return used
