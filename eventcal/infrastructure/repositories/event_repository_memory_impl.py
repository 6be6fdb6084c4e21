from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from eventcal.core.entities.event import Event
from eventcal.core.repositories.event_repository import (
    DuplicateEventError,
    EventRepository,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


class InMemoryEventRepositoryImpl(EventRepository):
    """
    Process-wide event store backed by a plain list and one lock.

    Responsibilities:
      - keep events in insertion order with no duplicate (date, name) pairs
      - run every operation, reads included, under the same exclusive lock

    If an exception escapes while the lock is held the list may be half-updated,
    so the store refuses all further work with StoreUnavailableError.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._lock = threading.Lock()
        self._broken = False

    @contextmanager
    def _exclusive(self) -> Iterator[list[Event]]:
        with self._lock:
            if self._broken:
                raise StoreUnavailableError("Event store is unavailable after an earlier failure")
            try:
                yield self._events
            except DuplicateEventError:
                raise
            except Exception:
                self._broken = True
                logger.exception("Event store operation failed while holding the lock")
                raise

    @staticmethod
    def _find_index(events: list[Event], event: Event) -> int | None:
        for i, stored in enumerate(events):
            if stored.date == event.date and stored.name == event.name:
                return i
        return None

    def add_if_absent(self, event: Event) -> bool:
        with self._exclusive() as events:
            if self._find_index(events, event) is not None:
                return False
            events.append(event)
            return True

    def replace(self, current: Event, new: Event) -> bool:
        with self._exclusive() as events:
            i = self._find_index(events, current)
            if i is None:
                return False
            clash = self._find_index(events, new)
            if clash is not None and clash != i:
                raise DuplicateEventError(f"Event {new.describe()} already exists")
            events[i] = new
            return True

    def remove(self, event: Event) -> bool:
        with self._exclusive() as events:
            i = self._find_index(events, event)
            if i is None:
                return False
            del events[i]
            return True

    def find(self, predicate: Callable[[Event], bool]) -> list[Event]:
        with self._exclusive() as events:
            return [event for event in events if predicate(event)]

    def count(self) -> int:
        with self._exclusive() as events:
            return len(events)
