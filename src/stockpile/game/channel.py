"""One-way FIFO channels between workers."""

from __future__ import annotations

import queue
import threading
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_CLOSED = object()


class ChannelClosedError(Exception):
    """The channel was closed; no more items can be sent or received."""

    pass


class Channel(Generic[T]):
    """Unbounded multiple-producer, single-consumer channel.

    Items are received in the order they were sent. After ``close()``,
    ``send`` raises ChannelClosedError; receivers still get every item sent
    before the close, then ChannelClosedError.

    Thread-safety: send() and close() are serialized by a threading.Lock so
    nothing can be queued behind the close marker.
    """

    def __init__(self, name: str = "channel"):
        self.name = name
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: T) -> None:
        """Queue an item for the receiver.

        Raises:
            ChannelClosedError: If the channel has been closed
        """
        with self._lock:
            if self._closed:
                raise ChannelClosedError(f"{self.name} channel is closed")
            self._queue.put(item)

    def recv(self, timeout: Optional[float] = None) -> T:
        """Block until the next item arrives.

        Args:
            timeout: Max wait time in seconds (None waits forever)

        Raises:
            ChannelClosedError: If the channel is closed and drained
            queue.Empty: If the timeout expires first
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # Leave the marker for any later recv()
            self._queue.put(_CLOSED)
            raise ChannelClosedError(f"{self.name} channel is closed")
        return item

    def try_recv(self) -> Optional[T]:
        """Next item if one is waiting, else None."""
        try:
            return self.recv(timeout=0)
        except queue.Empty:
            return None

    def close(self) -> None:
        """Stop accepting items. Closing twice is harmless."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[T]:
        """Yield items until the channel is closed."""
        while True:
            try:
                yield self.recv()
            except ChannelClosedError:
                return
