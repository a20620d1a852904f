from __future__ import annotations

import utm

from src.domain.models.geo import GeoLocation, UtmLocation

# The upstream grid is always UTM zone 32, northern hemisphere.
UTM_ZONE_NUMBER = 32


def to_geo(x: float, y: float) -> GeoLocation:
    """Convert a UTM-32N easting/northing pair to latitude/longitude."""

    lat, lng = utm.to_latlon(x, y, UTM_ZONE_NUMBER, northern=True)
    return GeoLocation(lat=float(lat), lng=float(lng))


def to_grid(lat: float, lng: float) -> UtmLocation:
    """Convert latitude/longitude to UTM-32N.

    Results are truncated (not rounded) to match upstream integer coordinates.
    """

    easting, northing, _, _ = utm.from_latlon(
        lat, lng, force_zone_number=UTM_ZONE_NUMBER
    )
    return UtmLocation(x=int(easting), y=int(northing))
