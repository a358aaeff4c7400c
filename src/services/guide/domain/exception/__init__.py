from .exceptions import (
    DatesUnavailableError,
    GuideNotHireableError,
    InvalidDaySelectionError,
    StaleCalendarException,
)

__all__ = [
    "DatesUnavailableError",
    "GuideNotHireableError",
    "InvalidDaySelectionError",
    "StaleCalendarException",
]
