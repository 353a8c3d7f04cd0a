"""
Utility functions for Nepali-English date conversion

Everything here is pure: no I/O, no logging, no shared mutable state.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from .calendar_data import ANCHOR_AD_DATE, DEFAULT_MONTH_TABLE, MonthLengthTable
from .exceptions import (
    DateAfterSupportedRange,
    DateBeforeSupportedRange,
    InvalidParameter,
)


NEPALI_MONTHS = [
    'Baishakh', 'Jestha', 'Ashadh', 'Shrawan', 'Bhadra', 'Ashwin',
    'Kartik', 'Mangsir', 'Poush', 'Magh', 'Falgun', 'Chaitra'
]

# Index 0 is Sunday
WEEKDAYS = [
    'Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday'
]


@dataclass(frozen=True)
class BSDate:
    year: int
    month: int
    day: int
    weekday: Optional[str] = field(default=None, compare=False)
    month_name: Optional[str] = field(default=None, compare=False)

    def as_dict(self):
        return {
            'year': self.year,
            'month': self.month,
            'monthName': self.month_name,
            'day': self.day,
            'weekday': self.weekday,
        }

    def __str__(self):
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class ADDate:
    year: int
    month: int
    day: int
    weekday: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_date(cls, value):
        return cls(value.year, value.month, value.day, WEEKDAYS[weekday_index(value)])

    @property
    def date(self):
        return date(self.year, self.month, self.day)

    def isoformat(self):
        return self.date.isoformat()

    def as_dict(self):
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'weekday': self.weekday,
            'date': self.isoformat(),
        }

    def __str__(self):
        return self.isoformat()


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    month_name: str
    days_in_month: int
    start_weekday_index: int  # 0=Sunday

    def as_dict(self):
        return {
            'year': self.year,
            'month': self.month,
            'monthName': self.month_name,
            'daysInMonth': self.days_in_month,
            'startWeekdayIndex': self.start_weekday_index,
        }


@dataclass(frozen=True)
class CalendarAnchor:
    """An AD date and a BS date that are the same real-world day"""

    ad_date: date
    bs_date: BSDate


def weekday_index(value):
    """Weekday of a date with 0=Sunday"""
    return value.isoweekday() % 7


def get_nepali_month_name(month: int) -> str:
    """Get Nepali month name from month number (1-12)"""
    if 1 <= month <= 12:
        return NEPALI_MONTHS[month - 1]
    raise ValueError(f"Invalid month: {month}")


def format_bs_date(year: int, month: int, day: int, format='full') -> str:
    """
    Format BS date in different styles

    Args:
        year, month, day: BS date components
        format: 'full', 'short', 'numeric'

    Returns:
        Formatted date string
    """
    month_name = get_nepali_month_name(month)

    if format == 'full':
        return f"{month_name} {day}, {year}"
    elif format == 'short':
        return f"{month_name[:3]} {day}, {year}"
    elif format == 'numeric':
        return f"{year}/{month:02d}/{day:02d}"
    else:
        return f"{year}/{month}/{day}"


def _check_month(month):
    if not 1 <= month <= 12:
        raise InvalidParameter("Month must be between 1 and 12")


class BSCalendar:
    """
    Converts between AD and BS by counting days from a fixed anchor.

    The anchor's BS side has to be the first day of the table's first year,
    since both directions count forward from there.
    """

    def __init__(self, table: MonthLengthTable, anchor: CalendarAnchor):
        if anchor.bs_date != BSDate(table.first_year, 1, 1):
            raise ValueError(
                f"Anchor must fall on {table.first_year}/01/01 BS, got {anchor.bs_date}"
            )
        self.table = table
        self.anchor = anchor

    def __repr__(self):
        return f"<BSCalendar {self.table.first_year}-{self.table.last_year} BS, anchor {self.anchor.ad_date}>"

    def is_valid_bs_date(self, year: int, month: int, day: int) -> bool:
        """Validate if a Nepali date is valid"""
        if year not in self.table:
            return False
        if month < 1 or month > 12:
            return False
        if day < 1 or day > self.table.days_in_month(year, month):
            return False
        return True

    def count_days_from_anchor(self, year: int, month: int, day: int) -> int:
        """Count total days from the anchor to a BS date"""
        # Raises YearOutOfRange before anything is summed
        current_year_data = self.table.month_lengths(year)
        _check_month(month)

        total_days = 0

        # Add days for complete years
        for y in range(self.table.first_year, year):
            total_days += self.table.days_in_year(y)

        # Add days for complete months in target year
        total_days += sum(current_year_data[:month - 1])

        # Add remaining days; no upper bound, day 32 of a 31-day month is the 1st of the next
        total_days += day - 1

        return total_days

    def bs_to_ad(self, year: int, month: int, day: int) -> ADDate:
        """
        Convert Bikram Sambat (BS) date to Anno Domini (AD) date

        Raises:
            YearOutOfRange: year is not in the month-length table
            InvalidParameter: month is not 1-12
        """
        days_diff = self.count_days_from_anchor(year, month, day)
        result = date.fromordinal(self.anchor.ad_date.toordinal() + days_diff)
        return ADDate.from_date(result)

    def ad_to_bs(self, year: int, month: int, day: int) -> BSDate:
        """
        Convert Anno Domini (AD) date to Bikram Sambat (BS) date

        Raises:
            DateBeforeSupportedRange: date is before the anchor
            DateAfterSupportedRange: date is past the end of the table
            InvalidParameter: not a real Gregorian date
        """
        try:
            ad_date = date(year, month, day)
        except ValueError as e:
            raise InvalidParameter(f"Invalid AD date {year}-{month}-{day}: {e}") from None
        return self.date_to_bs(ad_date)

    def date_to_bs(self, ad_date) -> BSDate:
        """Same as ad_to_bs, for a date or datetime. The clock time of a datetime is ignored."""
        if isinstance(ad_date, datetime):
            ad_date = ad_date.date()

        remaining_days = (ad_date - self.anchor.ad_date).days
        if remaining_days < 0:
            raise DateBeforeSupportedRange(
                f"Date is before supported range ({self.table.first_year} BS)"
            )

        # Find the year
        current_year = self.table.first_year
        while current_year in self.table:
            days_in_year = self.table.days_in_year(current_year)
            if remaining_days < days_in_year:
                break
            remaining_days -= days_in_year
            current_year += 1

        if current_year not in self.table:
            raise DateAfterSupportedRange(
                f"Date exceeds supported range ({self.table.last_year + 1} BS)"
            )

        # Find the month
        current_month = 0
        for days_in_month in self.table.month_lengths(current_year):
            if remaining_days < days_in_month:
                break
            remaining_days -= days_in_month
            current_month += 1

        return BSDate(
            year=current_year,
            month=current_month + 1,
            day=remaining_days + 1,
            weekday=WEEKDAYS[weekday_index(ad_date)],
            month_name=NEPALI_MONTHS[current_month],
        )

    def month_grid(self, year: int, month: int) -> MonthGrid:
        """Length and starting weekday of a BS month, for laying out a calendar page"""
        first_day = self.bs_to_ad(year, month, 1)

        return MonthGrid(
            year=year,
            month=month,
            month_name=NEPALI_MONTHS[month - 1],
            days_in_month=self.table.days_in_month(year, month),
            start_weekday_index=weekday_index(first_day.date),
        )


DEFAULT_ANCHOR = CalendarAnchor(
    ad_date=ANCHOR_AD_DATE,
    bs_date=BSDate(DEFAULT_MONTH_TABLE.first_year, 1, 1),
)

default_calendar = BSCalendar(DEFAULT_MONTH_TABLE, DEFAULT_ANCHOR)


def ad_to_bs(year: int, month: int, day: int) -> BSDate:
    return default_calendar.ad_to_bs(year, month, day)


def date_to_bs(ad_date) -> BSDate:
    return default_calendar.date_to_bs(ad_date)


def bs_to_ad(year: int, month: int, day: int) -> ADDate:
    return default_calendar.bs_to_ad(year, month, day)


def month_grid(year: int, month: int) -> MonthGrid:
    return default_calendar.month_grid(year, month)


def is_valid_bs_date(year: int, month: int, day: int) -> bool:
    return default_calendar.is_valid_bs_date(year, month, day)
