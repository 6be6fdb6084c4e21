from __future__ import annotations

from dataclasses import dataclass

from eventcal.core.entities.event import Event
from eventcal.core.repositories.event_repository import DuplicateEventError, EventRepository
from eventcal.core.use_cases.create_event import ConflictError


class NotFoundError(Exception):
    """Raise to map to HTTP 503 (or 404 without legacy status codes)."""


@dataclass(frozen=True, slots=True)
class UpdateEventResult:
    previous: Event
    current: Event
    message: str


class UpdateEventUseCase:
    """
    Rewrites both date and name of an existing event, keeping its position.

    The event is located by its exact (date, name) pair. Moving it onto a pair
    already held by another event is rejected so the store never holds duplicates.
    """

    def __init__(self, *, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, *, current: Event, new: Event) -> UpdateEventResult:
        try:
            replaced = self._event_repo.replace(current, new)
        except DuplicateEventError as e:
            raise ConflictError(str(e)) from e
        if not replaced:
            raise NotFoundError(f"Event {current.describe()} does not exist")

        return UpdateEventResult(
            previous=current,
            current=new,
            message=f"Update event: {current.describe()}, on event: {new.describe()}",
        )
