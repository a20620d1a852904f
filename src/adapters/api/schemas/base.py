from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoLocationSchema(ApiModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class UtmLocationSchema(ApiModel):
    x: int
    y: int


class UtmLocationInputSchema(ApiModel):
    x: float
    y: float


class LocationInputSchema(ApiModel):
    """Either ``geoLocation`` or ``utmLocation`` must be present."""

    geo_location: GeoLocationSchema | None = None
    utm_location: UtmLocationInputSchema | None = None


class IdRefSchema(ApiModel):
    id: str


class PlannerLocationInputSchema(ApiModel):
    """One of ``geo``, ``utm``, ``stop`` or ``area`` must be present."""

    geo: GeoLocationSchema | None = None
    utm: UtmLocationInputSchema | None = None
    stop: IdRefSchema | None = None
    area: IdRefSchema | None = None


class ErrorSchema(ApiModel):
    detail: str


# Statuses produced by the exception handlers in src/main.py.
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorSchema, "description": "Invalid caller input"},
    502: {"model": ErrorSchema, "description": "Upstream failure"},
}
