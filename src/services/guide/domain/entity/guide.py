from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from services.guide.domain.exception import (
    DatesUnavailableError,
    GuideNotHireableError,
)
from services.guide.domain.value_object import CalendarDay, GuideId
from services.shared.domain import AggregateRoot, Currency, Money


class Guide(AggregateRoot[GuideId]):
    """ガイド（予約可能日カレンダーの集約ルート）

    available_dates は複数のリクエストが奪い合う共有資源。
    この集約自体はメモリ上のオブジェクトで、永続化は ReservationStore.commit
    と GuideRepository.update_availability の version 条件付き書き込みでのみ
    行われる。version はその楽観ロック用。
    """

    def __init__(
        self,
        id: GuideId,
        name: str,
        currency: Currency,
        price_per_day: Decimal | None = None,
        available_dates: Iterable[CalendarDay] = (),
        is_active: bool = True,
        is_hireable: bool = True,
        version: int = 0,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._currency = currency
        self._price_per_day = price_per_day
        self._available_dates = frozenset(available_dates)
        self._is_active = is_active
        self._is_hireable = is_hireable
        self._version = version

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def price_per_day(self) -> Decimal | None:
        return self._price_per_day

    @property
    def available_dates(self) -> frozenset[CalendarDay]:
        return self._available_dates

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_hireable(self) -> bool:
        return self._is_hireable

    @property
    def version(self) -> int:
        return self._version

    def list_free_days(self) -> frozenset[CalendarDay]:
        """空いている日の集合"""
        return self._available_dates

    def unavailable_of(self, days: Iterable[CalendarDay]) -> frozenset[CalendarDay]:
        """指定日のうち空いていない日"""
        return frozenset(days) - self._available_dates

    def remove_days(self, days: Iterable[CalendarDay]) -> None:
        """指定日をすべて確保する。1日でも空いていなければ何も変更しない"""
        requested = frozenset(days)
        unavailable = self.unavailable_of(requested)
        if unavailable:
            raise DatesUnavailableError(unavailable)
        self._available_dates = self._available_dates - requested

    def add_days(
        self, days: Iterable[CalendarDay], today: date
    ) -> frozenset[CalendarDay]:
        """日付を空き日に戻す（補償用）

        すでに空いている日と today より前の日は無視する。
        実際に戻した日を返す。
        """
        restorable = frozenset(d for d in days if not d.is_before(today))
        restored = restorable - self._available_dates
        self._available_dates = self._available_dates | restored
        return restored

    def ensure_hireable(self) -> None:
        if not self._is_active or not self._is_hireable:
            raise GuideNotHireableError(f"Guide is not available for hire: {self.id}")
        if self._price_per_day is None or self._price_per_day <= 0:
            raise GuideNotHireableError(f"Guide has no price per day: {self.id}")

    def quote(self, days: Iterable[CalendarDay]) -> Money:
        """日額 × 日数の見積り（ガイドの通貨建て）"""
        self.ensure_hireable()
        return Money(amount=self._price_per_day, currency=self._currency).multiply(
            len(frozenset(days))
        )

    def change_price(self, price_per_day: Decimal | None, currency: Currency) -> None:
        """日額・通貨を変更する（既存の予約の金額には影響しない）"""
        if price_per_day is not None and price_per_day < 0:
            raise ValueError("Price per day cannot be negative")
        self._price_per_day = price_per_day
        self._currency = currency

    def change_hireable(self, is_hireable: bool) -> None:
        self._is_hireable = is_hireable

    def replace_available_dates(
        self, days: Iterable[CalendarDay], today: date
    ) -> frozenset[CalendarDay]:
        """空き日カレンダーを置き換える（管理者による設定）

        today より前の日は捨てる。設定後の空き日を返す。
        """
        self._available_dates = frozenset(d for d in days if not d.is_before(today))
        return self._available_dates
