"""Client configuration resolved from the environment.

Entry points call ``load_dotenv()`` first, so values may also come
from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ROOT_URL = "http://localhost:51000"
DEFAULT_TIMEOUT = 5.0


@dataclass
class ClientConfig:
    root_url: str = DEFAULT_ROOT_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from FORGETTABLE_URL and FORGETTABLE_TIMEOUT."""
        timeout = os.environ.get("FORGETTABLE_TIMEOUT")
        return cls(
            root_url=os.environ.get("FORGETTABLE_URL", DEFAULT_ROOT_URL),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
