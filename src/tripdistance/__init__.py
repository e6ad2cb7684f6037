#!/usr/bin/env python3
"""
Tripdistance - great-circle travel distance per trip from a log of
geolocation readings.

Readings may be geographic (latitude/longitude), n-vector or UTM grid
coordinates; each is decoded by its field set alone.
"""
import importlib.metadata

__version__ = importlib.metadata.version("tripdistance")

# Import main classes for public API
from .config import TripConfig
from .errors import (
    ChannelClosed,
    CoordinateDecodeError,
    DecodeExhaustedError,
    MalformedLineError,
    TripDistanceError,
)
from .geometry import Coordinate, GeographicCoordinate, NVectorCoordinate, Position
from .grid import GridCoordinate
from .conversion import geographic_to_nvector, nvector_to_geographic
from .distance import EARTH_RADIUS_KM, great_circle_distance, trip_distance
from .decoder import decode_coordinate, parse_record_line
from .trips import Record, Total, Trip, group_trips, read_records
from .pipeline import Channel, iter_totals

__all__ = [
    "TripConfig",
    "ChannelClosed",
    "CoordinateDecodeError",
    "DecodeExhaustedError",
    "MalformedLineError",
    "TripDistanceError",
    "Coordinate",
    "GeographicCoordinate",
    "NVectorCoordinate",
    "GridCoordinate",
    "Position",
    "geographic_to_nvector",
    "nvector_to_geographic",
    "EARTH_RADIUS_KM",
    "great_circle_distance",
    "trip_distance",
    "decode_coordinate",
    "parse_record_line",
    "Record",
    "Total",
    "Trip",
    "group_trips",
    "read_records",
    "Channel",
    "iter_totals",
]
