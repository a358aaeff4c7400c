from typing import Iterable, TypedDict

from services.currency.domain import RateTable, convert, exchange_rate
from services.guide.domain.entity import Guide
from services.guide.domain.value_object import CalendarDay
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.value_object import HireId, Requester
from services.shared.domain import Currency, Money


class HireDetails(TypedDict):
    """雇用依頼の入力データ"""

    requester: Requester
    display_currency: str | None
    comments: str | None


class HireRecordFactory:
    """ガイド雇用記録を生成するFactory

    見積りはここで一度だけ計算し、以後記録に固定される。
    """

    def create_confirmed(
        self,
        guide: Guide,
        days: Iterable[CalendarDay],
        details: HireDetails,
        rate_table: RateTable,
    ) -> HireRecord:
        """直接予約（確定済み）の記録を作成する"""
        record = self._create(guide, days, details, rate_table, HireStatus.CONFIRMED)
        record.confirm()
        return record

    def create_pending(
        self,
        guide: Guide,
        days: Iterable[CalendarDay],
        details: HireDetails,
        rate_table: RateTable,
    ) -> HireRecord:
        """承認待ちの依頼を作成する（カレンダーは変更しない）"""
        return self._create(guide, days, details, rate_table, HireStatus.PENDING)

    def _create(
        self,
        guide: Guide,
        days: Iterable[CalendarDay],
        details: HireDetails,
        rate_table: RateTable,
        status: HireStatus,
    ) -> HireRecord:
        frozen_days = frozenset(days)
        base_total = guide.quote(frozen_days)

        display_code = details.get("display_currency")
        display_currency = Currency(display_code) if display_code else guide.currency
        total = Money(
            amount=convert(
                base_total.amount, base_total.currency, display_currency, rate_table
            ),
            currency=display_currency,
        )

        return HireRecord(
            id=HireId.generate(),
            guide_id=guide.id,
            requester=details["requester"],
            days=frozen_days,
            total_price=total,
            base_total_price=base_total,
            exchange_rate=exchange_rate(base_total.currency, display_currency, rate_table),
            status=status,
            payment_status=PaymentStatus.UNPAID,
            comments=details.get("comments"),
        )
