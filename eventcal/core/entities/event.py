from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


def start_of_week(day: date) -> date:
    """Return the Monday of the ISO week containing `day`."""
    return day - timedelta(days=day.weekday())


def format_utc(moment: datetime) -> str:
    """
    Human-readable UTC rendering used in confirmation messages,
    e.g. `2024-03-04 10:00:00 UTC` or `2024-03-04 10:00:00.250 UTC`.
    """
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        fraction = f"{moment.microsecond:06d}"
        if fraction.endswith("000"):
            fraction = fraction[:3]
        text = f"{text}.{fraction}"
    return f"{text} UTC"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A calendar entry. Two events are the same record iff date and name are equal.
    """
    date: datetime
    name: str

    def __post_init__(self) -> None:
        if self.date.tzinfo is None:
            raise ValueError("Event date must be timezone-aware")
        if not self.name:
            raise ValueError("Event name must be a non-empty string")
        # normalize so equality and calendar fields are always evaluated in UTC
        object.__setattr__(self, "date", self.date.astimezone(timezone.utc))

    def describe(self) -> str:
        return f"'{self.name}' for date {format_utc(self.date)}"

    def occurs_on(self, day: date) -> bool:
        return self.date.date() == day

    def occurs_in_week_of(self, day: date) -> bool:
        return start_of_week(self.date.date()) == start_of_week(day)

    def occurs_in_month_of(self, day: date) -> bool:
        return (self.date.year, self.date.month) == (day.year, day.month)
