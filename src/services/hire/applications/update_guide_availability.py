import os
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable

from services.currency.domain import ExchangeRateRepository, UnknownCurrencyError
from services.guide.domain import (
    CalendarDay,
    Guide,
    GuideId,
    GuideRepository,
    StaleCalendarException,
    parse_calendar_days,
)
from services.hire.domain.exception import DatesAlreadyHiredError
from services.hire.domain.repository import HireRecordRepository
from services.shared.domain import Currency
from services.shared.domain.exception import ConflictError, ResourceNotFoundException
from services.shared.utils.clock import utc_today
from services.shared.utils.logger import get_logger

logger = get_logger()


class UpdateGuideAvailabilityService:
    """ガイドの空き日・日額・通貨・雇用可否を設定するユースケース（管理者用）

    指定された項目だけを変更する。カレンダーの書き込みは予約と同じ
    version 条件付きで行い、競合した場合は読み直して再適用する。
    承認済み・確定済みの雇用が確保している日は空き日にできない。
    """

    def __init__(
        self,
        guide_repository: GuideRepository,
        hire_repository: HireRecordRepository,
        rate_repository: ExchangeRateRepository,
        today: Callable[[], date] = utc_today,
        max_attempts: int | None = None,
    ) -> None:
        self._guide_repository = guide_repository
        self._hire_repository = hire_repository
        self._rate_repository = rate_repository
        self._today = today
        self._max_attempts = max_attempts or int(os.getenv("MAX_COMMIT_ATTEMPTS", "5"))

    def update(
        self,
        guide_id: GuideId,
        available_dates: Iterable[str] | None = None,
        price_per_day: Decimal | None = None,
        currency: str | None = None,
        is_hireable: bool | None = None,
    ) -> Guide:
        days = parse_calendar_days(available_dates) if available_dates is not None else None
        new_currency = self._supported_currency(currency) if currency is not None else None
        today = self._today()

        for attempt in range(1, self._max_attempts + 1):
            guide = self._guide_repository.find_by_id(guide_id)
            if guide is None:
                raise ResourceNotFoundException(f"Guide not found: {guide_id}")

            if days is not None:
                self._ensure_not_hired(guide_id, days, today)
                guide.replace_available_dates(days, today)
            if price_per_day is not None or new_currency is not None:
                guide.change_price(
                    price_per_day if price_per_day is not None else guide.price_per_day,
                    new_currency or guide.currency,
                )
            if is_hireable is not None:
                guide.change_hireable(is_hireable)

            try:
                self._guide_repository.update_availability(guide)
            except StaleCalendarException:
                logger.info(
                    "Guide calendar changed before availability update, retrying",
                    extra={"guide_id": str(guide_id), "attempt": attempt},
                )
                continue

            logger.info(
                "Guide availability updated",
                extra={
                    "guide_id": str(guide_id),
                    "days": len(guide.available_dates),
                    "attempt": attempt,
                },
            )
            return guide

        raise ConflictError(
            f"Calendar of guide {guide_id} is being modified concurrently, "
            f"gave up after {self._max_attempts} attempts"
        )

    def _supported_currency(self, code: str) -> Currency:
        try:
            currency = Currency(code)
        except ValueError:
            raise UnknownCurrencyError([code])
        if currency not in self._rate_repository.get_rate_table():
            raise UnknownCurrencyError([str(currency)])
        return currency

    def _ensure_not_hired(
        self, guide_id: GuideId, days: frozenset[CalendarDay], today: date
    ) -> None:
        hired = frozenset(
            day
            for record in self._hire_repository.find_by_guide_id(guide_id)
            if record.status.holds_days
            for day in record.days & days
            if not day.is_before(today)
        )
        if hired:
            raise DatesAlreadyHiredError(hired)
