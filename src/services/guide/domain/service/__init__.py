from .day_selection import parse_calendar_days, parse_day_selection

__all__ = ["parse_calendar_days", "parse_day_selection"]
