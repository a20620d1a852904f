from .transit import (
    AmbiguousLocationInput,
    ClientInputError,
    InvalidPlannerLocation,
    LocationOutOfRange,
    MalformedUpstreamRecord,
    TransitError,
    UpstreamError,
    UpstreamMalformedResponse,
    UpstreamUnavailable,
)

__all__ = [
    "AmbiguousLocationInput",
    "ClientInputError",
    "InvalidPlannerLocation",
    "LocationOutOfRange",
    "MalformedUpstreamRecord",
    "TransitError",
    "UpstreamError",
    "UpstreamMalformedResponse",
    "UpstreamUnavailable",
]
