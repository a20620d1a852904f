from __future__ import annotations

from fastapi import Request

from src.adapters.settings import UpstreamRuntimeConfig
from src.adapters.upstream import ResponseCache, RuterHttpClient, RuterTransitProvider
from src.app.services.transit_query_service import TransitQueryService


def build_transit_query_service(config: UpstreamRuntimeConfig) -> TransitQueryService:
    """Wire one service instance with its own response cache."""

    cache = ResponseCache(
        max_entries=config.cache_max_entries, ttl_s=config.cache_ttl_s
    )
    client = RuterHttpClient(base_url=config.base_url, timeout_s=config.timeout_s)
    return TransitQueryService(
        provider=RuterTransitProvider(client=client, cache=cache)
    )


def get_transit_query_service(request: Request) -> TransitQueryService:
    service = getattr(request.app.state, "transit_query_service", None)
    if service is None:
        raise RuntimeError("Transit query service not configured")
    return service
