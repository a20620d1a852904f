from __future__ import annotations


class TransitError(Exception):
    """Base exception for transit data failures."""


class UpstreamError(TransitError):
    """The upstream transit API could not deliver usable data."""


class UpstreamUnavailable(UpstreamError):
    """Network failure or non-2xx status from the upstream API."""

    def __init__(self, url: str, status: int | None = None) -> None:
        self.url = url
        self.status = status
        reason = f"status {status}" if status is not None else "network error"
        super().__init__(f"Upstream unavailable ({reason}): {url}")


class UpstreamMalformedResponse(UpstreamError):
    """Upstream answered 2xx but the body is not valid JSON."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Upstream returned a non-JSON body: {url}")


class MalformedUpstreamRecord(TransitError):
    """A parsed upstream record lacks a field the normalizer requires."""

    def __init__(self, kind: str, field: str, detail: str | None = None) -> None:
        self.kind = kind
        self.field = field
        msg = f"Malformed {kind} record: {field}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ClientInputError(TransitError, ValueError):
    """Caller-supplied input violates an input contract."""


class AmbiguousLocationInput(ClientInputError):
    """Location input has neither a geographic nor a grid coordinate."""


class InvalidPlannerLocation(ClientInputError):
    """Planner location has none of geo, utm, stop or area set."""


class LocationOutOfRange(ClientInputError):
    """Geographic location lies outside the upstream grid's projection domain."""
