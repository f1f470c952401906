"""Month grid for the booking calendar."""

import calendar
from dataclasses import dataclass
from datetime import date

from bookings.domain.availability import DateSet, each_day


@dataclass(frozen=True)
class CalendarDay:
    day: date
    is_past: bool
    is_booked: bool
    is_today: bool
    is_check_in: bool
    is_check_out: bool
    in_range: bool

    @property
    def is_selectable(self) -> bool:
        return not self.is_booked and not self.is_past


@dataclass(frozen=True)
class MonthCalendar:
    year: int
    month: int
    leading_blanks: int
    days: tuple[CalendarDay, ...]


def month_calendar(
    year: int,
    month: int,
    date_set: DateSet,
    today: date,
    check_in: date | None = None,
    check_out: date | None = None,
) -> MonthCalendar:
    """Build the day grid for a month; weeks start on Monday.

    Raises:
        ValueError: If year or month is out of range.
    """
    first_weekday, length = calendar.monthrange(year, month)
    first = date(year, month, 1)
    last = date(year, month, length)
    days = tuple(
        CalendarDay(
            day=day,
            is_past=day < today,
            is_booked=date_set.is_booked(day),
            is_today=day == today,
            is_check_in=day == check_in,
            is_check_out=day == check_out,
            in_range=bool(check_in and check_out and check_in <= day <= check_out),
        )
        for day in each_day(first, last)
    )
    return MonthCalendar(year=year, month=month, leading_blanks=first_weekday, days=days)
