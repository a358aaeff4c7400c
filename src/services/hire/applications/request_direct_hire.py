from datetime import date
from typing import Callable, Iterable

from services.currency.domain import ExchangeRateRepository
from services.guide.domain import Guide, GuideId, parse_day_selection
from services.hire.applications.create_payable_order import CreatePayableOrderService
from services.hire.applications.post_commit import (
    HireResult,
    create_order_after_hold,
    publish_events,
)
from services.hire.applications.reservation_transaction import (
    PendingCommit,
    ReservationTransaction,
)
from services.hire.domain.factory import HireDetails, HireRecordFactory
from services.hire.domain.gateway import HireNotifier
from services.hire.domain.value_object import Requester
from services.shared.utils.clock import utc_today


class RequestDirectHireService:
    """空き日を指定してガイドを直接予約するユースケース

    日付の確保と確定済み記録の作成を1つの原子的単位で行い、
    その後に決済用注文の作成と通知を行う。
    """

    def __init__(
        self,
        transaction: ReservationTransaction,
        factory: HireRecordFactory,
        rate_repository: ExchangeRateRepository,
        order_service: CreatePayableOrderService,
        notifier: HireNotifier,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._transaction = transaction
        self._factory = factory
        self._rate_repository = rate_repository
        self._order_service = order_service
        self._notifier = notifier
        self._today = today

    def request(
        self,
        guide_id: GuideId,
        days: Iterable[str],
        requester: Requester,
        display_currency: str | None = None,
        comments: str | None = None,
    ) -> HireResult:
        selection = parse_day_selection(days, self._today())
        rate_table = self._rate_repository.get_rate_table()
        details: HireDetails = {
            "requester": requester,
            "display_currency": display_currency,
            "comments": comments,
        }

        def hold(guide: Guide) -> PendingCommit:
            guide.ensure_hireable()
            guide.remove_days(selection)
            record = self._factory.create_confirmed(guide, selection, details, rate_table)
            return PendingCommit(record=record, expected_status=None)

        record = self._transaction.execute(guide_id, hold)
        order = create_order_after_hold(self._order_service, record)
        publish_events(self._notifier, record)
        return HireResult(record=record, order=order)
