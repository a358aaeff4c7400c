from datetime import date

import pytest

from services.guide.domain import CalendarDay, InvalidDaySelectionError, parse_day_selection, to_strings


class TestCalendarDay:
    @pytest.mark.parametrize("value", ["2030-1-10", "10-01-2030", "2030-02-30", "", "tomorrow"])
    def test_invalid_day(self, value):
        with pytest.raises(ValueError):
            CalendarDay(value)

    def test_is_before(self):
        day = CalendarDay("2030-01-10")
        assert day.is_before(date(2030, 1, 11))
        assert not day.is_before(date(2030, 1, 10))

    def test_to_strings_is_sorted(self):
        days = {CalendarDay("2030-02-01"), CalendarDay("2030-01-31")}
        assert to_strings(days) == ["2030-01-31", "2030-02-01"]

    def test_of_date(self):
        assert CalendarDay.of(date(2030, 3, 5)) == CalendarDay("2030-03-05")


class TestParseDaySelection:
    def test_valid_selection(self, today):
        selection = parse_day_selection(["2030-01-02", "2030-01-01"], today)
        assert selection == {CalendarDay("2030-01-01"), CalendarDay("2030-01-02")}

    @pytest.mark.parametrize(
        "values",
        [
            [],
            ["2030-13-01"],
            ["2030-01-05", "2030-01-05"],
            ["2029-12-31", "2030-01-05"],
        ],
    )
    def test_invalid_selection(self, values, today):
        with pytest.raises(InvalidDaySelectionError):
            parse_day_selection(values, today)
