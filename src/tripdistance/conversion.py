#!/usr/bin/env python3
"""
Conversions between the n-vector and latitude/longitude representations.

An n-vector is the unit vector normal to the Earth sphere at a position:
https://en.wikipedia.org/wiki/N-vector

Its components are dimensionless. They are never scaled by a
degrees-per-radian factor.
"""

from typing import Tuple
import math


def nvector_to_geographic(x: float, y: float, z: float) -> Tuple[float, float]:
    """
    Convert n-vector components to latitude and longitude.

    At the poles longitude is undefined; ``atan2(0, 0)`` yields 0 there.

    Args:
        x: Component towards (0°N, 0°E)
        y: Component towards (0°N, 90°E)
        z: Component towards the north pole

    Returns:
        Tuple of (latitude, longitude) in decimal degrees
    """
    latitude = math.degrees(math.atan2(z, math.hypot(x, y)))
    longitude = math.degrees(math.atan2(y, x))
    return latitude, longitude


def geographic_to_nvector(
    latitude: float, longitude: float
) -> Tuple[float, float, float]:
    """
    Convert latitude and longitude to n-vector components.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        Tuple of (x, y, z) unit-vector components
    """
    lat, lon = math.radians(latitude), math.radians(longitude)
    return (
        math.cos(lat) * math.cos(lon),
        math.cos(lat) * math.sin(lon),
        math.sin(lat),
    )
