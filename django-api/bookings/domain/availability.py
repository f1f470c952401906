"""Booked-date set and availability queries.

Every day from check-in through check-out *inclusive* is blocked: the
calendar treats each reserved stay as a run of full-day blocks, so a new
guest cannot arrive on the day an existing guest leaves.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from bookings.domain.models import BookedInterval
from bookings.domain.value_objects import to_day

logger = logging.getLogger(__name__)


class Availability(Enum):
    """Availability of a single day."""

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    BOOKED = "booked"


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end, both inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


@dataclass(frozen=True)
class DateSet:
    """Set of individually blocked calendar days for one apartment."""

    days: frozenset[date] = frozenset()

    def is_booked(self, day: date | datetime) -> bool:
        return to_day(day) in self.days

    def range_has_conflict(self, start: date | datetime, end: date | datetime) -> bool:
        """Return True if any day from start through end is booked.

        An empty sequence (start after end) has no conflict; callers reject
        inverted ranges themselves.
        """
        start, end = to_day(start), to_day(end)
        return any(start <= day <= end for day in self.days)

    def sorted_days(self) -> list[date]:
        return sorted(self.days)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.is_booked(day)

    def __len__(self) -> int:
        return len(self.days)


def build_date_set(intervals: Iterable[BookedInterval]) -> DateSet:
    """Union the inclusive day spans of all intervals.

    An interval whose check-out precedes its check-in contributes no days.
    """
    days: set[date] = set()
    for interval in intervals:
        if interval.check_out < interval.check_in:
            logger.warning(
                "Ignoring inverted booked interval %s..%s",
                interval.check_in,
                interval.check_out,
            )
            continue
        days.update(each_day(interval.check_in, interval.check_out))
    return DateSet(days=frozenset(days))


def parse_booked_rows(rows: Iterable[Mapping[str, Any]]) -> list[BookedInterval]:
    """Convert raw store rows to intervals, skipping rows that cannot be parsed."""
    intervals = []
    for row in rows:
        try:
            intervals.append(BookedInterval.from_row(row))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed booking row: %r", row)
    return intervals
