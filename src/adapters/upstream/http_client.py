from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from src.adapters.settings import DEFAULT_BASE_URL
from src.domain.exceptions import UpstreamMalformedResponse, UpstreamUnavailable

logger = logging.getLogger(__name__)


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a query map into upstream query-string values.

    ``None`` values are dropped, lists are comma-joined and booleans are
    lowercased.
    """

    out: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            if not value:
                continue
            out[key] = ",".join(str(v) for v in value)
        else:
            out[key] = str(value)
    return out


@dataclass(slots=True)
class RuterHttpClient:
    """Thin JSON GET client for the upstream transit API.

    Does not retry; callers decide what to do with failures.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0
    # Injected in tests (httpx.MockTransport).
    transport: httpx.AsyncBaseTransport | None = None

    def build_url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        url = self.build_url(path)
        query = encode_params(params)
        logger.debug("fetching url %s params=%s", url, query)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self.transport
            ) as client:
                resp = await client.get(url, params=query)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(url) from exc

        if not resp.is_success:
            raise UpstreamUnavailable(url, resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamMalformedResponse(url) from exc
