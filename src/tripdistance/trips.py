#!/usr/bin/env python3
"""
Trip data model and the adjacent-id grouping of records into trips.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, NamedTuple, Optional
import logging

from .config import TripConfig
from .decoder import parse_record_line
from .distance import trip_distance
from .geometry import Coordinate

logger = logging.getLogger(__name__)


class Record(NamedTuple):
    """One decoded input line."""

    traveler_id: int
    coordinate: Coordinate


class Total(NamedTuple):
    """Distance travelled on one trip, in kilometers."""

    traveler_id: int
    distance: float


@dataclass
class Trip:
    """The ordered readings of one contiguous block of a traveler id."""

    traveler_id: int
    trajectory: List[Coordinate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.trajectory)

    def __iter__(self):
        return iter(self.trajectory)

    def append(self, coordinate: Coordinate) -> None:
        self.trajectory.append(coordinate)


def read_records(filename: str, config: Optional[TripConfig] = None) -> Iterator[Record]:
    """
    Read and decode records from a file, one per line.

    The file is closed when the generator finishes, fails or is closed.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not UTF-8 text
        DecodeExhaustedError: If a line cannot be decoded
    """
    with open(filename, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            traveler_id, coordinate = parse_record_line(line, config, line_number)
            yield Record(traveler_id, coordinate)


def group_trips(
    records: Iterable[Record], config: Optional[TripConfig] = None
) -> Iterator[Trip]:
    """
    Group consecutive records sharing a traveler id into trips.

    Records must be contiguous per traveler: an id that comes back after
    other ids starts a new trip instead of extending the earlier one.

    Args:
        records: Records in input order
        config: Settings; each closed trip is logged when debug is on

    Yields:
        Trips in the order they close
    """
    debug = config is not None and config.debug
    current: Optional[Trip] = None

    for record in records:
        if current is not None and current.traveler_id == record.traveler_id:
            current.append(record.coordinate)
            continue

        if current is not None:
            if debug:
                logger.debug(f"Trip {current.traveler_id} closed with {len(current)} points")
            yield current
        current = Trip(record.traveler_id, [record.coordinate])

    if current is not None:
        if debug:
            logger.debug(f"Trip {current.traveler_id} closed with {len(current)} points")
        yield current


def compute_total(trip: Trip) -> Total:
    """Sum the great-circle distance between consecutive points of a trip."""
    return Total(trip.traveler_id, trip_distance(trip.trajectory))
