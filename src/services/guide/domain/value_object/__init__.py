from .calendar_day import CalendarDay, to_strings
from .guide_id import GuideId

__all__ = ["CalendarDay", "GuideId", "to_strings"]
