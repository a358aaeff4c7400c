from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from services.guide.domain.value_object import CalendarDay, GuideId, to_strings
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.event import (
    HireApproved,
    HireCancelled,
    HireCompleted,
    HireConfirmed,
    HireEvent,
    HireRejected,
)
from services.hire.domain.exception import InvalidTransitionError
from services.hire.domain.value_object import HireId, Requester
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class HireRecord(AggregateRoot[HireId]):
    """ガイド雇用記録

    - days は作成時点のスナップショットで、以後変更しない
    - total_price / base_total_price は作成時の見積りで、ガイドの日額変更に追従しない
    - 変更できるのは status と payment_status（と管理者メモ）のみ
    """

    def __init__(
        self,
        id: HireId,
        guide_id: GuideId,
        requester: Requester,
        days: Iterable[CalendarDay],
        total_price: Money,
        base_total_price: Money,
        exchange_rate: Decimal = Decimal("1"),
        status: HireStatus = HireStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.UNPAID,
        comments: str | None = None,
        admin_notes: str | None = None,
        created_at: IsoDateTime | None = None,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)
        frozen_days = frozenset(days)
        if not frozen_days:
            raise BusinessRuleViolationException("Hire record must claim at least one day")

        self._guide_id = guide_id
        self._requester = requester
        self._days = frozen_days
        self._total_price = total_price
        self._base_total_price = base_total_price
        self._exchange_rate = exchange_rate
        self._status = status
        self._payment_status = payment_status
        self._comments = comments
        self._admin_notes = admin_notes
        self._created_at = created_at or IsoDateTime.now()
        self._updated_at = updated_at or self._created_at

    @property
    def guide_id(self) -> GuideId:
        return self._guide_id

    @property
    def requester(self) -> Requester:
        return self._requester

    @property
    def days(self) -> frozenset[CalendarDay]:
        return self._days

    @property
    def number_of_days(self) -> int:
        return len(self._days)

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def base_total_price(self) -> Money:
        return self._base_total_price

    @property
    def exchange_rate(self) -> Decimal:
        return self._exchange_rate

    @property
    def status(self) -> HireStatus:
        return self._status

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def comments(self) -> str | None:
        return self._comments

    @property
    def admin_notes(self) -> str | None:
        return self._admin_notes

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    def releasable_days(self, today: date) -> frozenset[CalendarDay]:
        """補償で空き日に戻せる日（today 以降）"""
        return frozenset(d for d in self._days if not d.is_before(today))

    def confirm(self) -> None:
        """直接予約として確定済みであることを記録する（作成直後のみ）"""
        if self._status != HireStatus.CONFIRMED:
            raise InvalidTransitionError(self._status, HireStatus.CONFIRMED)
        self._record(HireConfirmed)

    def approve(self, admin_notes: str | None = None) -> None:
        """承認する（pending → approved）"""
        self._transition(HireStatus.APPROVED, admin_notes)
        self._record(HireApproved)

    def reject(self, admin_notes: str | None = None) -> None:
        """却下する"""
        self._transition(HireStatus.REJECTED, admin_notes)
        self._record(HireRejected)

    def cancel(self, admin_notes: str | None = None) -> None:
        """キャンセルする（承認・確定後のみ）"""
        self._transition(HireStatus.CANCELLED, admin_notes)
        self._record(HireCancelled)

    def complete(self, admin_notes: str | None = None) -> None:
        """業務完了にする"""
        self._transition(HireStatus.COMPLETED, admin_notes)
        self._record(HireCompleted)

    def mark_paid(self) -> None:
        self._transition_payment(PaymentStatus.PAID)

    def refund(self) -> None:
        self._transition_payment(PaymentStatus.REFUNDED)

    def _transition(self, target: HireStatus, admin_notes: str | None) -> None:
        if not self._status.can_transition_to(target):
            raise InvalidTransitionError(self._status, target)
        self._status = target
        if admin_notes is not None:
            self._admin_notes = admin_notes
        self._updated_at = IsoDateTime.now()

    def _transition_payment(self, target: PaymentStatus) -> None:
        if not self._payment_status.can_transition_to(target):
            raise InvalidTransitionError(self._payment_status, target)
        self._payment_status = target
        self._updated_at = IsoDateTime.now()

    def _record(self, event_type: type[HireEvent]) -> None:
        self.add_domain_event(
            event_type(
                hire_id=str(self.id),
                guide_id=str(self._guide_id),
                days=tuple(to_strings(self._days)),
            )
        )
