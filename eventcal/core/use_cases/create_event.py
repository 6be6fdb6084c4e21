from __future__ import annotations

from dataclasses import dataclass

from eventcal.core.entities.event import Event
from eventcal.core.repositories.event_repository import EventRepository


class ConflictError(Exception):
    """Raise to map to HTTP 503 (or 409 without legacy status codes)."""


@dataclass(frozen=True, slots=True)
class CreateEventResult:
    event: Event
    message: str


class CreateEventUseCase:
    def __init__(self, *, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, event: Event) -> CreateEventResult:
        if not self._event_repo.add_if_absent(event):
            raise ConflictError(f"Event {event.describe()} already exists")

        return CreateEventResult(event=event, message=f"Added event: {event.describe()}")
