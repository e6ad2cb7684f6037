#!/usr/bin/env python3
"""
Coordinate value types.

Every coordinate variant exposes latitude and longitude in degrees. A JSON
payload carries no type tag, so each variant declares the exact set of
fields it is made of and refuses anything else.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, NamedTuple
import json
import logging
import math

from .conversion import geographic_to_nvector, nvector_to_geographic
from .errors import CoordinateDecodeError

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


def _has_type(value: Any, kind: type) -> bool:
    if kind is float:
        # JSON true/false decode to bool, which Python treats as int
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return False
        try:
            return math.isfinite(float(value))
        except OverflowError:
            return False
    return isinstance(value, kind)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name}")


class Coordinate(ABC):
    """A position that can report its latitude and longitude in degrees."""

    # Field name -> expected type (float for any JSON number, str for text)
    FIELDS: ClassVar[Dict[str, type]] = {}

    @abstractmethod
    def latitude_degrees(self) -> float:
        """Latitude in decimal degrees."""

    @abstractmethod
    def longitude_degrees(self) -> float:
        """Longitude in decimal degrees."""

    def to_position(self) -> Position:
        return Position(self.latitude_degrees(), self.longitude_degrees())

    @classmethod
    def from_mapping(cls, obj: Any) -> "Coordinate":
        """
        Build a coordinate from a decoded JSON object with exactly this
        variant's fields.

        Args:
            obj: Result of ``json.loads`` on a payload

        Returns:
            Instance of the variant

        Raises:
            CoordinateDecodeError: If the field count, any field name or any
                field type differs from ``FIELDS``
        """
        name = cls.__name__
        if not isinstance(obj, dict):
            raise CoordinateDecodeError(f"Not a JSON object for: {name}")

        if len(obj) > len(cls.FIELDS):
            raise CoordinateDecodeError(f"Too many fields for: {name}")
        if len(obj) < len(cls.FIELDS):
            raise CoordinateDecodeError(f"Not enough fields for: {name}")

        values = {}
        for field_name, kind in cls.FIELDS.items():
            if field_name not in obj:
                raise CoordinateDecodeError(f'Missing field: "{field_name}"')
            if not _has_type(obj[field_name], kind):
                raise CoordinateDecodeError(f'Wrong type for field: "{field_name}"')
            values[field_name] = kind(obj[field_name])

        try:
            return cls(**values)
        except ValueError as e:
            raise CoordinateDecodeError(f"Invalid {name}: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "Coordinate":
        """
        Parse a JSON payload as this variant.

        Raises:
            CoordinateDecodeError: If the text is not JSON or does not match
                the variant's fields exactly
        """
        try:
            obj = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise CoordinateDecodeError(
                f"Invalid JSON for: {cls.__name__}: {e}"
            ) from e
        return cls.from_mapping(obj)


@dataclass(frozen=True)
class GeographicCoordinate(Coordinate):
    """A position given directly by latitude and longitude in degrees."""

    FIELDS: ClassVar[Dict[str, type]] = {"latitude": float, "longitude": float}

    latitude: float
    longitude: float

    def latitude_degrees(self) -> float:
        return self.latitude

    def longitude_degrees(self) -> float:
        return self.longitude


@dataclass(frozen=True)
class NVectorCoordinate(Coordinate):
    """A position in the n-vector horizontal position representation."""

    FIELDS: ClassVar[Dict[str, type]] = {"x": float, "y": float, "z": float}

    x: float
    y: float
    z: float

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "NVectorCoordinate":
        """Convert any coordinate to its n-vector."""
        x, y, z = geographic_to_nvector(
            coord.latitude_degrees(), coord.longitude_degrees()
        )
        return cls(x, y, z)

    def to_geographic(self) -> GeographicCoordinate:
        return GeographicCoordinate(*nvector_to_geographic(self.x, self.y, self.z))

    def latitude_degrees(self) -> float:
        return nvector_to_geographic(self.x, self.y, self.z)[0]

    def longitude_degrees(self) -> float:
        return nvector_to_geographic(self.x, self.y, self.z)[1]
