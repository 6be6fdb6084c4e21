from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, AwareDatetime, BaseModel, BeforeValidator, ConfigDict, Field

_RFC3339_SHAPE = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?P<fraction>\.\d+)?(?:[Zz]|[+-](?:[01]\d|2[0-3]):[0-5]\d)"
)
_ISO_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


def require_rfc3339_text(value: Any) -> str:
    """
    Only accept RFC 3339 text with an explicit offset; pydantic does the actual parsing.

    Fractions beyond microseconds are truncated.
    """
    if not isinstance(value, str):
        raise ValueError("expected an RFC 3339 date-time string")
    match = _RFC3339_SHAPE.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 date-time: {value!r}")
    fraction = match["fraction"]
    if fraction and len(fraction) > 7:
        value = value[:match.start("fraction") + 7] + value[match.end("fraction"):]
    return value.upper()


def require_iso_date_text(value: Any) -> str:
    if not isinstance(value, str) or _ISO_DATE_SHAPE.fullmatch(value) is None:
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
    return value


def to_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[AwareDatetime, BeforeValidator(require_rfc3339_text), AfterValidator(to_utc)]
IsoDate = Annotated[date, BeforeValidator(require_iso_date_text)]
EventName = Annotated[str, Field(min_length=1)]


class EventRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date_time: UtcDateTime
    event_name: EventName


class EventUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date_time: UtcDateTime
    event_name: EventName
    new_date_time: UtcDateTime
    new_event_name: EventName


class Event(BaseModel):
    date: datetime
    name: str


class ResultMessage(BaseModel):
    result: str


class EventList(BaseModel):
    result: list[Event]


class Error(BaseModel):
    error: str
