"""Synchronous progress notifications for playlist scans."""

from collections.abc import Callable
from typing import NamedTuple


class ProgressEvent(NamedTuple):
    """A single property change, e.g. ``("progress", -1, 0)``."""

    name: str
    old_value: int
    new_value: int


ProgressCallback = Callable[[ProgressEvent], None]


class ProgressNotifier:
    """Delivers ProgressEvents to subscribers in subscription order.

    Delivery happens on the caller's thread; a slow subscriber stalls the caller.
    """

    def __init__(self):
        self._subscribers: list[ProgressCallback] = []

    def subscribe(self, callback: ProgressCallback) -> None:
        """Add a subscriber. The same callable may be subscribed more than once."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ProgressCallback) -> None:
        """Remove one registration of a subscriber; unknown callables are ignored."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    @property
    def subscribers(self) -> tuple[ProgressCallback, ...]:
        return tuple(self._subscribers)

    def fire(self, name: str, old_value: int, new_value: int) -> ProgressEvent:
        """Notify every subscriber of a change and return the event sent."""
        event = ProgressEvent(name, old_value, new_value)
        # Iterate over a snapshot so subscribers may unsubscribe themselves
        for callback in tuple(self._subscribers):
            callback(event)
        return event
