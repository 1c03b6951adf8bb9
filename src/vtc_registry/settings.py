from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from vtc_registry.labels import BASE_URL


DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "vtc-registry/0.1 (+https://registre-vtc.developpement-durable.gouv.fr)"


def _env_timeout(name: str, default: float) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = str(raw).strip()
    if not v:
        return None
    try:
        seconds = float(v)
    except ValueError:
        return default
    if seconds <= 0:
        return None
    return seconds


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment.

    `timeout` is the bound callers put on each registry request; `None` means
    wait indefinitely.
    """

    base_url: str
    timeout: Optional[float]
    user_agent: str

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = (os.getenv("VTC_BASE_URL") or BASE_URL).strip().rstrip("/")
        return cls(
            base_url=base_url,
            timeout=_env_timeout("VTC_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
            user_agent=(os.getenv("VTC_USER_AGENT") or DEFAULT_USER_AGENT).strip(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Test helper to force env re-read."""

    get_settings.cache_clear()
