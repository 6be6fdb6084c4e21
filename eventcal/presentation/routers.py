from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from eventcal.core.repositories.event_repository import EventRepository
from eventcal.core.use_cases.create_event import ConflictError
from eventcal.core.use_cases.delete_event import NotFoundError as DeleteNotFoundError
from eventcal.core.use_cases.get_events_for_period import Period
from eventcal.core.use_cases.update_event import NotFoundError as UpdateNotFoundError
from eventcal.schemas.models import EventList, EventRequest, EventUpdateRequest, IsoDate, ResultMessage
from eventcal.services.event_service import (
    create_event_service,
    delete_event_service,
    get_events_service,
    update_event_service,
)

router = APIRouter()


def get_event_repository(request: Request) -> EventRepository:
    return request.app.state.event_repository


def _business_error(status_code: int, exc: Exception) -> HTTPException:
    """Duplicate / missing events answer 503 unless legacy status codes are switched off."""
    from eventcal.infrastructure.config import settings

    if settings.legacy_status_codes:
        status_code = 503
    return HTTPException(status_code=status_code, detail=str(exc))


@router.post("/create_event", response_model=ResultMessage, status_code=201)
def post_create_event(body: EventRequest, repo: EventRepository = Depends(get_event_repository)) -> ResultMessage:
    """
    Add an event

    Returns:
      - 201 with a confirmation message
      - 400 on malformed input
      - 503 if an identical (date, name) event exists
    """
    try:
        return create_event_service(body, repo)
    except ConflictError as e:
        raise _business_error(409, e)


@router.post("/update_event", response_model=ResultMessage)
def post_update_event(body: EventUpdateRequest, repo: EventRepository = Depends(get_event_repository)) -> ResultMessage:
    """
    Replace date and name of an existing event

    Returns:
      - 200 with a confirmation message
      - 400 on malformed input
      - 503 if the original event is missing or the new one would be a duplicate
    """
    try:
        return update_event_service(body, repo)
    except UpdateNotFoundError as e:
        raise _business_error(404, e)
    except ConflictError as e:
        raise _business_error(409, e)


@router.post("/delete_event", response_model=ResultMessage)
def post_delete_event(body: EventRequest, repo: EventRepository = Depends(get_event_repository)) -> ResultMessage:
    """
    Remove an event
    """
    try:
        return delete_event_service(body, repo)
    except DeleteNotFoundError as e:
        raise _business_error(404, e)


@router.get("/events_for_day", response_model=EventList)
def get_events_for_day(
    day: IsoDate = Query(alias="date"),
    repo: EventRepository = Depends(get_event_repository),
) -> EventList:
    return get_events_service(Period.DAY, day, repo)


@router.get("/events_for_week", response_model=EventList)
def get_events_for_week(
    day: IsoDate = Query(alias="date"),
    repo: EventRepository = Depends(get_event_repository),
) -> EventList:
    return get_events_service(Period.WEEK, day, repo)


@router.get("/events_for_month", response_model=EventList)
def get_events_for_month(
    day: IsoDate = Query(alias="date"),
    repo: EventRepository = Depends(get_event_repository),
) -> EventList:
    return get_events_service(Period.MONTH, day, repo)
