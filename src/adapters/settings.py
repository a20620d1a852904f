from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://reisapi.ruter.no"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else default


@dataclass(frozen=True, slots=True)
class UpstreamRuntimeConfig:
    """Runtime knobs for the upstream client and its response cache.

    Env vars:
      - REISGRAPH_BASE_URL: upstream base address (default reisapi.ruter.no)
      - REISGRAPH_TIMEOUT_S: request timeout (default 10)
      - REISGRAPH_CACHE_MAX_ENTRIES: response cache capacity (default 200)
      - REISGRAPH_CACHE_TTL_S: response cache TTL seconds (default 20)
      - REISGRAPH_REVEAL_ERRORS: include exception text in 500 responses
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0
    cache_max_entries: int = 200
    cache_ttl_s: float = 20.0
    reveal_errors: bool = False

    @staticmethod
    def from_env() -> "UpstreamRuntimeConfig":
        base_url = (os.getenv("REISGRAPH_BASE_URL") or "").strip() or DEFAULT_BASE_URL

        return UpstreamRuntimeConfig(
            base_url=base_url.rstrip("/"),
            timeout_s=_env_float("REISGRAPH_TIMEOUT_S", 10.0),
            cache_max_entries=_env_int("REISGRAPH_CACHE_MAX_ENTRIES", 200),
            cache_ttl_s=_env_float("REISGRAPH_CACHE_TTL_S", 20.0),
            reveal_errors=_env_bool("REISGRAPH_REVEAL_ERRORS", False),
        )
