from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum


class ExceptionKind(IntEnum):
    """GTFS calendar_dates exception types."""

    ADDED = 1
    REMOVED = 2


@dataclass(slots=True)
class Service:
    """Weekly service pattern with a validity range and exception dates.

    `weekdays` is Monday-indexed. Exception dates are only mutated while the
    feed is imported; afterwards the service is shared read-only by trips.
    """

    start: date
    end: date
    weekdays: tuple[bool, bool, bool, bool, bool, bool, bool]
    added: set[date] = field(default_factory=set)
    removed: set[date] = field(default_factory=set)

    def __post_init__(self) -> None:
        if len(self.weekdays) != 7:
            raise ValueError(f"Expected 7 weekday flags, got {len(self.weekdays)}")

    @classmethod
    def exceptions_only(cls, day: date) -> Service:
        # calendar_dates-only feeds: no regular pattern at all.
        return cls(start=day, end=day, weekdays=(False,) * 7)

    def add_exception_date(self, day: date, kind: ExceptionKind) -> None:
        if kind is ExceptionKind.ADDED:
            self.added.add(day)
        else:
            self.removed.add(day)

    def regularly_available_at(self, day: date) -> bool:
        return self.start <= day <= self.end and self.weekdays[day.weekday()]

    def available_at(self, day: date) -> bool:
        return (
            self.regularly_available_at(day) and day not in self.removed
        ) or day in self.added
