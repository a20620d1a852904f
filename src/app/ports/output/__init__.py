from .transit_provider import ITransitProvider

__all__ = ["ITransitProvider"]
