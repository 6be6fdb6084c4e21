from __future__ import annotations

from datetime import date
from enum import Enum

from eventcal.core.entities.event import Event
from eventcal.core.repositories.event_repository import EventRepository


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class GetEventsForPeriodUseCase:
    """
    Use-case for GET /events_for_{day,week,month}

    Matches are returned in insertion order. Weeks start on Monday.
    """

    def __init__(self, *, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, *, period: Period, day: date) -> list[Event]:
        if period is Period.DAY:
            return self._event_repo.find(lambda event: event.occurs_on(day))
        if period is Period.WEEK:
            return self._event_repo.find(lambda event: event.occurs_in_week_of(day))
        if period is Period.MONTH:
            return self._event_repo.find(lambda event: event.occurs_in_month_of(day))
        raise ValueError(f"Unsupported period: {period}")
