import argparse
from dataclasses import dataclass


@dataclass
class TripConfig:
    """Configuration for the tripdistance CLI."""

    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TripConfig":
        """Build a config from parsed command-line arguments."""
        if args.debug:
            return cls(debug=True, log_level="DEBUG")
        return cls(debug=False, log_level=args.log_level)
