from enum import Enum
from typing import Iterable

from services.guide.domain.value_object import CalendarDay, to_strings

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ConflictError,
)


class AlreadyProcessedError(ConflictError):
    """別の操作者がすでにこの雇用記録を遷移させていた"""

    def __init__(self, hire_id: object) -> None:
        self.hire_id = str(hire_id)
        super().__init__(f"Hire request was already processed: {self.hire_id}")


class InvalidTransitionError(BusinessRuleViolationException):
    """状態遷移表にない遷移"""

    def __init__(self, current: Enum, target: Enum) -> None:
        self.current = current.value
        self.target = target.value
        super().__init__(f"Cannot transition from {self.current} to {self.target}")


class DatesAlreadyHiredError(ConflictError):
    """空き日にしようとした日が承認済み・確定済みの雇用で確保されている"""

    def __init__(self, days: Iterable[CalendarDay]) -> None:
        self.dates = to_strings(days)
        super().__init__(f"Dates are held by active hires: {', '.join(self.dates)}")
