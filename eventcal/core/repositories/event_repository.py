from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from eventcal.core.entities.event import Event


class StoreUnavailableError(Exception):
    """Raise to map to HTTP 500 (shared store state can no longer be trusted)."""


class DuplicateEventError(Exception):
    """Raised by `replace` when the new value collides with another stored event."""


class EventRepository(ABC):
    """
    Repository interface for the shared event collection.

    Every method is atomic with respect to every other method.
    """

    @abstractmethod
    def add_if_absent(self, event: Event) -> bool:
        """Return True if appended, False if an equal (date, name) event already exists."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, current: Event, new: Event) -> bool:
        """
        Overwrite `current` with `new` in place.

        Returns False if `current` is missing. Raises DuplicateEventError if
        `new` equals a different stored event.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, event: Event) -> bool:
        """Return True if removed, False if no equal event exists."""
        raise NotImplementedError

    @abstractmethod
    def find(self, predicate: Callable[[Event], bool]) -> list[Event]:
        """Return matching events in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
