from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable

_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True, order=True)
class CalendarDay:
    """予約可能な1日（YYYY-MM-DD）

    文字列の辞書順と日付順が一致するので、比較は value で行う。
    """

    value: str

    def __post_init__(self) -> None:
        if not _ISO_DAY.match(self.value):
            raise ValueError(f"Invalid date format (YYYY-MM-DD): {self.value}")
        try:
            date.fromisoformat(self.value)
        except ValueError as e:
            raise ValueError(f"Invalid calendar date: {self.value}") from e

    def __str__(self) -> str:
        return self.value

    def to_date(self) -> date:
        return date.fromisoformat(self.value)

    def is_before(self, today: date) -> bool:
        """today より前（もう予約できない日）かどうか"""
        return self.to_date() < today

    @classmethod
    def of(cls, d: date) -> CalendarDay:
        return cls(d.isoformat())


def to_strings(days: Iterable[CalendarDay]) -> list[str]:
    """日付集合をソート済み文字列リストにする（レスポンス・永続化用）"""
    return [str(day) for day in sorted(days)]
