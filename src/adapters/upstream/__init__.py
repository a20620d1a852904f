from .http_client import RuterHttpClient
from .response_cache import ResponseCache, cache_key
from .ruter_transit_provider import RuterTransitProvider

__all__ = ["ResponseCache", "RuterHttpClient", "RuterTransitProvider", "cache_key"]
