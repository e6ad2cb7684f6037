#!/usr/bin/env python3
"""
UTM grid coordinates.

The inverse projection from easting/northing to latitude/longitude is done
by pyproj on the WGS84 datum.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict
import logging
import math
import threading

import pyproj

from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Latitude bands C..X without I and O; bands below N are south of the equator
UTM_ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWX"

_projections = threading.local()


def create_utm_projection(zone_number: int, southern: bool) -> pyproj.Proj:
    """
    Get the UTM projection for a zone, memoized per thread.

    Args:
        zone_number: UTM zone number, 1 to 60
        southern: True for the southern hemisphere

    Returns:
        pyproj.Proj object for the zone
    """
    cache = getattr(_projections, "cache", None)
    if cache is None:
        cache = _projections.cache = {}

    key = (zone_number, southern)
    if key not in cache:
        hemisphere = " +south" if southern else ""
        proj_string = f"+proj=utm +zone={zone_number}{hemisphere} +datum=WGS84 +units=m +no_defs"
        logger.debug(f"Creating projection: {proj_string}")
        cache[key] = pyproj.Proj(proj_string)
    return cache[key]


@dataclass(frozen=True)
class GridCoordinate(Coordinate):
    """A position on the UTM grid: easting/northing in meters plus a zone."""

    FIELDS: ClassVar[Dict[str, type]] = {
        "easting": float,
        "northing": float,
        "zone_number": float,
        "zone_letter": str,
    }

    easting: float
    northing: float
    zone_number: int
    zone_letter: str
    _latitude: float = field(init=False, repr=False, compare=False)
    _longitude: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not float(self.zone_number).is_integer() or not 1 <= self.zone_number <= 60:
            raise ValueError(f"zone number must be an integer from 1 to 60, got {self.zone_number}")
        object.__setattr__(self, "zone_number", int(self.zone_number))

        letter = self.zone_letter.upper()
        if len(letter) != 1 or letter not in UTM_ZONE_LETTERS:
            raise ValueError(f"unknown zone letter {self.zone_letter!r}")

        projection = create_utm_projection(self.zone_number, self.is_southern())
        longitude, latitude = projection(self.easting, self.northing, inverse=True)
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise ValueError(
                f"easting {self.easting} / northing {self.northing} cannot be projected in zone {self.zone}"
            )

        object.__setattr__(self, "_latitude", latitude)
        object.__setattr__(self, "_longitude", longitude)

    @property
    def zone(self) -> str:
        return f"{self.zone_number}{self.zone_letter.upper()}"

    def is_southern(self) -> bool:
        return self.zone_letter.upper() < "N"

    def latitude_degrees(self) -> float:
        return self._latitude

    def longitude_degrees(self) -> float:
        return self._longitude
