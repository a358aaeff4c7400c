from .entity import Guide
from .exception import (
    DatesUnavailableError,
    GuideNotHireableError,
    InvalidDaySelectionError,
    StaleCalendarException,
)
from .repository import GuideRepository
from .service import parse_calendar_days, parse_day_selection
from .value_object import CalendarDay, GuideId, to_strings

__all__ = [
    "Guide",
    "GuideId",
    "CalendarDay",
    "GuideRepository",
    "DatesUnavailableError",
    "GuideNotHireableError",
    "InvalidDaySelectionError",
    "StaleCalendarException",
    "parse_calendar_days",
    "parse_day_selection",
    "to_strings",
]
