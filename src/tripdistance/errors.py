#!/usr/bin/env python3
"""
Exceptions raised while decoding readings and running the trip pipeline.
"""

from typing import List, Optional


class TripDistanceError(Exception):
    """Base class for all tripdistance errors."""


class CoordinateDecodeError(TripDistanceError, ValueError):
    """A payload does not have the exact shape of one coordinate variant."""


class DecodeExhaustedError(TripDistanceError, ValueError):
    """No coordinate variant accepted a payload."""

    def __init__(self, text: str, reasons: Optional[List[str]] = None):
        self.text = text
        self.reasons = list(reasons or [])
        super().__init__(f"Cannot decode coordinate: {text}")


class MalformedLineError(DecodeExhaustedError):
    """A line could not be split into a traveler id and a coordinate payload."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        super().__init__(line, [reason])
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        self.args = (f"Malformed record{location} ({reason}): {line!r}",)


class ChannelClosed(TripDistanceError):
    """Raised when receiving from a drained channel or sending on a closed one."""
