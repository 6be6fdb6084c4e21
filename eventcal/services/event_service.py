from __future__ import annotations

from datetime import date

from eventcal.core.entities.event import Event as CoreEvent
from eventcal.core.repositories.event_repository import EventRepository
from eventcal.core.use_cases.create_event import CreateEventUseCase
from eventcal.core.use_cases.delete_event import DeleteEventUseCase
from eventcal.core.use_cases.get_events_for_period import GetEventsForPeriodUseCase, Period
from eventcal.core.use_cases.update_event import UpdateEventUseCase
from eventcal.schemas.models import Event, EventList, EventRequest, EventUpdateRequest, ResultMessage


def _to_core_event(body: EventRequest) -> CoreEvent:
    """
    Translate API schema EventRequest -> core Event entity.
    """
    return CoreEvent(date=body.date_time, name=body.event_name)


def _to_schema_event(event: CoreEvent) -> Event:
    return Event(date=event.date, name=event.name)


def create_event_service(body: EventRequest, event_repo: EventRepository) -> ResultMessage:
    use_case = CreateEventUseCase(event_repo=event_repo)
    result = use_case.execute(_to_core_event(body))
    return ResultMessage(result=result.message)


def update_event_service(body: EventUpdateRequest, event_repo: EventRepository) -> ResultMessage:
    use_case = UpdateEventUseCase(event_repo=event_repo)
    result = use_case.execute(
        current=CoreEvent(date=body.date_time, name=body.event_name),
        new=CoreEvent(date=body.new_date_time, name=body.new_event_name),
    )
    return ResultMessage(result=result.message)


def delete_event_service(body: EventRequest, event_repo: EventRepository) -> ResultMessage:
    use_case = DeleteEventUseCase(event_repo=event_repo)
    result = use_case.execute(_to_core_event(body))
    return ResultMessage(result=result.message)


def get_events_service(period: Period, day: date, event_repo: EventRepository) -> EventList:
    use_case = GetEventsForPeriodUseCase(event_repo=event_repo)
    events = use_case.execute(period=period, day=day)
    return EventList(result=[_to_schema_event(event) for event in events])
