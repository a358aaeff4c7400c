from datetime import date
from typing import Iterable

from services.guide.domain.exception import InvalidDaySelectionError
from services.guide.domain.value_object import CalendarDay


def parse_day_selection(values: Iterable[str], today: date) -> frozenset[CalendarDay]:
    """リクエストされた日付文字列を検証して日付集合にする

    空・形式不正・重複・today より前の日はすべて InvalidDaySelectionError。
    """
    raw = list(values)
    if not raw:
        raise InvalidDaySelectionError("At least one date must be selected")

    days: list[CalendarDay] = []
    for value in raw:
        try:
            days.append(CalendarDay(value))
        except ValueError as e:
            raise InvalidDaySelectionError(str(e)) from e

    selection = frozenset(days)
    if len(selection) != len(days):
        raise InvalidDaySelectionError("Selected dates must not contain duplicates")

    past = sorted(d for d in selection if d.is_before(today))
    if past:
        raise InvalidDaySelectionError(
            f"Dates in the past cannot be booked: {', '.join(map(str, past))}"
        )
    return selection


def parse_calendar_days(values: Iterable[str]) -> frozenset[CalendarDay]:
    """管理者が設定する空き日を日付集合にする（空は全日閉鎖、重複は1日にまとめる）"""
    try:
        return frozenset(CalendarDay(value) for value in values)
    except ValueError as e:
        raise InvalidDaySelectionError(str(e)) from e
