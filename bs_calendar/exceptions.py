"""
Error kinds raised by the calendar engine and the API boundary
"""
from enum import Enum


class ErrorKind(str, Enum):
    YEAR_OUT_OF_RANGE = 'YearOutOfRange'
    DATE_BEFORE_SUPPORTED_RANGE = 'DateBeforeSupportedRange'
    DATE_AFTER_SUPPORTED_RANGE = 'DateAfterSupportedRange'
    INVALID_PARAMETER = 'InvalidParameter'


class CalendarError(ValueError):
    """Base class for conversion failures. Every subclass carries its kind."""

    kind = None
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class YearOutOfRange(CalendarError):
    kind = ErrorKind.YEAR_OUT_OF_RANGE


class DateBeforeSupportedRange(CalendarError):
    kind = ErrorKind.DATE_BEFORE_SUPPORTED_RANGE


class DateAfterSupportedRange(CalendarError):
    kind = ErrorKind.DATE_AFTER_SUPPORTED_RANGE


class InvalidParameter(CalendarError):
    kind = ErrorKind.INVALID_PARAMETER


class AppError(Exception):
    """Error raised by views, rendered by ApiErrorMiddleware"""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
