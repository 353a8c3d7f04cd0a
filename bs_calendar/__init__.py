"""
BS Calendar - Bikram Sambat <-> Gregorian date conversion for Nepal
"""

__version__ = '2.0.0'

# Import commonly used functions for easy access
from .utils import (
    ad_to_bs,
    date_to_bs,
    bs_to_ad,
    month_grid,
    is_valid_bs_date,
    format_bs_date,
    get_nepali_month_name,
    BSCalendar,
    BSDate,
    ADDate,
    MonthGrid,
    CalendarAnchor,
    NEPALI_MONTHS,
)
from .calendar_data import MonthLengthTable
from .exceptions import (
    ErrorKind,
    CalendarError,
    YearOutOfRange,
    DateBeforeSupportedRange,
    DateAfterSupportedRange,
    InvalidParameter,
)

__all__ = [
    'ad_to_bs',
    'date_to_bs',
    'bs_to_ad',
    'month_grid',
    'is_valid_bs_date',
    'format_bs_date',
    'get_nepali_month_name',
    'BSCalendar',
    'BSDate',
    'ADDate',
    'MonthGrid',
    'CalendarAnchor',
    'MonthLengthTable',
    'NEPALI_MONTHS',
    'ErrorKind',
    'CalendarError',
    'YearOutOfRange',
    'DateBeforeSupportedRange',
    'DateAfterSupportedRange',
    'InvalidParameter',
]
