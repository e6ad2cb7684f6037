#!/usr/bin/env python3
"""
Strict decoding of coordinate payloads and record lines.

Payloads carry no type tag. Each variant in COORDINATE_VARIANTS is tried in
order and only accepts an object with exactly its own fields, so the first
variant that accepts a payload is the only one that could.
"""

from typing import Optional, Tuple, Type
import logging

from .config import TripConfig
from .errors import CoordinateDecodeError, DecodeExhaustedError, MalformedLineError
from .geometry import Coordinate, GeographicCoordinate, NVectorCoordinate
from .grid import GridCoordinate

logger = logging.getLogger(__name__)

COORDINATE_VARIANTS: Tuple[Type[Coordinate], ...] = (
    GeographicCoordinate,
    NVectorCoordinate,
    GridCoordinate,
)


def decode_coordinate(text: str, config: Optional[TripConfig] = None) -> Coordinate:
    """
    Decode a JSON payload into whichever coordinate variant it matches.

    Args:
        text: JSON object text
        config: Settings; per-variant failures are logged when debug is on

    Returns:
        The decoded coordinate

    Raises:
        DecodeExhaustedError: If no variant accepts the payload
    """
    debug = config is not None and config.debug
    reasons = []

    for variant in COORDINATE_VARIANTS:
        try:
            return variant.from_json(text)
        except CoordinateDecodeError as e:
            reasons.append(str(e))
            if debug:
                logger.debug(f"{variant.__name__} rejected {text!r}: {e}")

    raise DecodeExhaustedError(text, reasons)


def parse_record_line(
    line: str,
    config: Optional[TripConfig] = None,
    line_number: Optional[int] = None,
) -> Tuple[int, Coordinate]:
    """
    Split a "<id><TAB><json>" line and decode both parts.

    Args:
        line: One input line, with or without its trailing newline
        config: Settings passed through to decode_coordinate
        line_number: 1-based position of the line, used in error messages

    Returns:
        Tuple of (traveler id, coordinate)

    Raises:
        MalformedLineError: If the line has no tab, an empty payload or a
            non-integer id
        DecodeExhaustedError: If the payload matches no coordinate variant
    """
    line = line.rstrip("\r\n")
    traveler, sep, payload = line.partition("\t")
    if not sep:
        raise MalformedLineError(line, "missing tab separator", line_number)
    if not payload.strip():
        raise MalformedLineError(line, "empty coordinate payload", line_number)

    try:
        traveler_id = int(traveler)
    except ValueError:
        raise MalformedLineError(
            line, f"traveler id {traveler!r} is not an integer", line_number
        ) from None

    return traveler_id, decode_coordinate(payload, config)
