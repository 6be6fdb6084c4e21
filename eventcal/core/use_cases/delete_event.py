from __future__ import annotations

from dataclasses import dataclass

from eventcal.core.entities.event import Event
from eventcal.core.repositories.event_repository import EventRepository


class NotFoundError(Exception):
    """Raise to map to HTTP 503 (or 404 without legacy status codes)."""


@dataclass(frozen=True, slots=True)
class DeleteEventResult:
    event: Event
    message: str


class DeleteEventUseCase:
    def __init__(self, *, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, event: Event) -> DeleteEventResult:
        if not self._event_repo.remove(event):
            raise NotFoundError(f"Event {event.describe()} does not exist")

        return DeleteEventResult(event=event, message=f"Removed event: {event.describe()}")
