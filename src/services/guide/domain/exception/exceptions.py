from typing import Iterable

from services.guide.domain.value_object import CalendarDay, to_strings
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ConflictError,
    OptimisticLockException,
)


class DatesUnavailableError(ConflictError):
    """指定日の一部がすでに空いていない"""

    def __init__(self, days: Iterable[CalendarDay]) -> None:
        self.dates = to_strings(days)
        super().__init__(f"Dates are no longer available: {', '.join(self.dates)}")


class StaleCalendarException(OptimisticLockException):
    """読み込み後にガイドのカレンダーが更新されていた（バージョン不一致）"""

    pass


class GuideNotHireableError(BusinessRuleViolationException):
    """ガイドが非アクティブ・雇用不可・日額未設定"""

    pass


class InvalidDaySelectionError(BusinessRuleViolationException):
    """日付指定が不正（空・形式不正・重複・過去日）"""

    pass
