#!/usr/bin/env python3
"""
Three-stage trip pipeline: file -> trips -> totals -> caller.

Stages run on their own threads and hand messages over through
zero-capacity channels, so no stage gets more than one message ahead of the
next one.
"""

from contextlib import closing
from typing import Generic, Iterator, Optional, TypeVar
import logging
import threading

from .config import TripConfig
from .errors import ChannelClosed
from .trips import Total, Trip, compute_total, group_trips, read_records

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Channel(Generic[T]):
    """
    A rendezvous channel between one sending and one receiving thread.

    ``send`` returns only after a receiver has taken the item. Closing the
    channel with an error makes receivers raise that error once the channel
    is drained.
    """

    def __init__(self, name: str = "channel"):
        self.name = name
        self._cond = threading.Condition()
        self._send_lock = threading.Lock()
        self._item: Optional[T] = None
        self._full = False
        self._closed = False
        self._error: Optional[BaseException] = None

    def send(self, item: T) -> None:
        """
        Hand an item to the receiver, blocking until it has been taken.

        Raises:
            ChannelClosed: If the channel is already closed
        """
        with self._send_lock, self._cond:
            if self._closed:
                raise ChannelClosed(f"send on closed {self.name}")
            self._item = item
            self._full = True
            self._cond.notify_all()
            while self._full and not self._closed:
                self._cond.wait()
            if self._full:
                self._item = None
                self._full = False
                raise ChannelClosed(f"{self.name} closed before the item was taken")

    def receive(self) -> T:
        """
        Take the next item, blocking until one is sent or the channel closes.

        Raises:
            ChannelClosed: If the channel was closed normally and is drained
            Exception: The error the channel was closed with, if any
        """
        with self._cond:
            while not self._full and not self._closed:
                self._cond.wait()
            if self._full:
                item = self._item
                self._item = None
                self._full = False
                self._cond.notify_all()
                return item  # type: ignore[return-value]
            if self._error is not None:
                raise self._error
            raise ChannelClosed(f"{self.name} is closed")

    def close(self, error: Optional[BaseException] = None) -> None:
        """Close the channel, optionally passing an error downstream.

        Only the first call has an effect.
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._error = error
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return


def load_trips(
    filename: str, trips: "Channel[Trip]", config: Optional[TripConfig] = None
) -> None:
    """
    Read a record file and send each completed trip over a channel.

    The channel is closed once the last trip has been taken, or closed with
    the error if reading or decoding fails.
    """
    logger.debug(f"Loading trips from {filename}")
    count = 0
    try:
        with closing(read_records(filename, config)) as records:
            for trip in group_trips(records, config):
                trips.send(trip)
                count += 1
    except Exception as e:
        trips.close(e)
        return
    logger.debug(f"Loaded {count} trips from {filename}")
    trips.close()


def compute_distances(trips: "Channel[Trip]", totals: "Channel[Total]") -> None:
    """
    Receive trips, send their total distance, and close ``totals`` once
    ``trips`` closes. An error arriving on ``trips`` is passed on.
    """
    try:
        for trip in trips:
            total = compute_total(trip)
            logger.debug(
                f"Trip {total.traveler_id}: {len(trip)} points, {total.distance:.3f} km"
            )
            totals.send(total)
    except Exception as e:
        totals.close(e)
        return
    totals.close()


def iter_totals(filename: str, config: Optional[TripConfig] = None) -> Iterator[Total]:
    """
    Run the pipeline over a record file and yield trip totals in the order
    the trips close.

    The caller's thread is the final stage. Worker threads are joined before
    the generator finishes.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
        DecodeExhaustedError: If a record cannot be decoded
    """
    trips: Channel[Trip] = Channel("trips")
    totals: Channel[Total] = Channel("totals")

    workers = [
        threading.Thread(
            target=load_trips, args=(filename, trips, config), name="load-trips", daemon=True
        ),
        threading.Thread(
            target=compute_distances, args=(trips, totals), name="compute-distances", daemon=True
        ),
    ]
    for worker in workers:
        worker.start()

    try:
        yield from totals
    finally:
        # Unblocks the workers if the caller stopped early
        totals.close()
        trips.close()
        for worker in workers:
            worker.join()
