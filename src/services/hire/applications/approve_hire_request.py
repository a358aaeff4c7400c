from services.guide.domain import Guide
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
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus
from services.hire.domain.exception import AlreadyProcessedError, InvalidTransitionError
from services.hire.domain.gateway import HireNotifier
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId
from services.shared.domain.exception import ResourceNotFoundException


class ApproveHireRequestService:
    """承認待ちの依頼を承認し、依頼日をカレンダーから確保するユースケース

    同じ依頼を同時に承認しても、確保が成功するのは1回だけ。
    """

    def __init__(
        self,
        repository: HireRecordRepository,
        transaction: ReservationTransaction,
        order_service: CreatePayableOrderService,
        notifier: HireNotifier,
    ) -> None:
        self._repository = repository
        self._transaction = transaction
        self._order_service = order_service
        self._notifier = notifier

    def approve(self, hire_id: HireId, admin_notes: str | None = None) -> HireResult:
        record = self._find(hire_id)
        if record.status == HireStatus.APPROVED:
            raise AlreadyProcessedError(hire_id)
        if not record.status.can_transition_to(HireStatus.APPROVED):
            raise InvalidTransitionError(record.status, HireStatus.APPROVED)

        def hold(guide: Guide) -> PendingCommit:
            current = self._find(hire_id)
            if current.status != HireStatus.PENDING:
                raise AlreadyProcessedError(hire_id)
            guide.remove_days(current.days)
            current.approve(admin_notes)
            return PendingCommit(record=current, expected_status=HireStatus.PENDING)

        approved = self._transaction.execute(record.guide_id, hold)
        order = create_order_after_hold(self._order_service, approved)
        publish_events(self._notifier, approved)
        return HireResult(record=approved, order=order)

    def _find(self, hire_id: HireId) -> HireRecord:
        record = self._repository.find_by_id(hire_id)
        if record is None:
            raise ResourceNotFoundException(f"Hire record not found: {hire_id}")
        return record
