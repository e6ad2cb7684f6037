#!/usr/bin/env python3
"""
Great-circle distance calculations.
"""

from typing import List, Sequence
import logging
import math

from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def great_circle_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the great-circle distance between two coordinates.

    Uses the Haversine formula on a sphere of radius EARTH_RADIUS_KM.

    Args:
        coord1: First coordinate
        coord2: Second coordinate

    Returns:
        Distance in kilometers
    """
    pos1, pos2 = coord1.to_position(), coord2.to_position()

    lat1, lon1 = math.radians(pos1.latitude), math.radians(pos1.longitude)
    lat2, lon2 = math.radians(pos2.latitude), math.radians(pos2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )

    # Rounding can push a a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, a)))


def cumulative_distances(trajectory: Sequence[Coordinate]) -> List[float]:
    """
    Calculate the distance travelled up to each point of a trajectory.

    Args:
        trajectory: Coordinates in travel order

    Returns:
        List of cumulative distances in kilometers, same length as trajectory
    """
    if not trajectory:
        return []

    distances = [0.0]
    for i in range(1, len(trajectory)):
        distances.append(
            distances[-1] + great_circle_distance(trajectory[i - 1], trajectory[i])
        )
    return distances


def trip_distance(trajectory: Sequence[Coordinate]) -> float:
    """
    Sum the distances between consecutive points of a trajectory.

    Returns:
        Total distance in kilometers; 0.0 for fewer than two points
    """
    return sum(
        (
            great_circle_distance(trajectory[i], trajectory[i + 1])
            for i in range(len(trajectory) - 1)
        ),
        0.0,
    )
