from datetime import date
from typing import Callable

from services.guide.domain import Guide
from services.hire.applications.post_commit import publish_events
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
from services.shared.domain.exception import (
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils.clock import utc_today
from services.shared.utils.logger import get_logger

logger = get_logger()


class RejectOrCancelHireRequestService:
    """依頼の却下・キャンセルのユースケース（補償トランザクション）

    日付を確保している記録（approved / confirmed）は、遷移と同時に
    今日以降の日をカレンダーへ戻す。pending の却下はカレンダーに触れない。
    """

    def __init__(
        self,
        repository: HireRecordRepository,
        transaction: ReservationTransaction,
        notifier: HireNotifier,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._repository = repository
        self._transaction = transaction
        self._notifier = notifier
        self._today = today

    def reject(self, hire_id: HireId, admin_notes: str | None = None) -> HireRecord:
        return self._release(hire_id, HireStatus.REJECTED, admin_notes)

    def cancel(self, hire_id: HireId, admin_notes: str | None = None) -> HireRecord:
        return self._release(hire_id, HireStatus.CANCELLED, admin_notes)

    def _release(
        self, hire_id: HireId, target: HireStatus, admin_notes: str | None
    ) -> HireRecord:
        record = self._find(hire_id)
        expected_status = record.status
        if not expected_status.can_transition_to(target):
            raise InvalidTransitionError(expected_status, target)

        if expected_status.holds_days:
            released = self._release_with_compensation(record, target, admin_notes)
        else:
            _apply(record, target, admin_notes)
            try:
                self._repository.update_status(record, expected_status)
            except OptimisticLockException as e:
                raise AlreadyProcessedError(hire_id) from e
            released = record

        publish_events(self._notifier, released)
        return released

    def _release_with_compensation(
        self, record: HireRecord, target: HireStatus, admin_notes: str | None
    ) -> HireRecord:
        hire_id = record.id
        expected_status = record.status
        today = self._today()

        def give_back(guide: Guide) -> PendingCommit:
            current = self._find(hire_id)
            if current.status != expected_status:
                raise AlreadyProcessedError(hire_id)
            _apply(current, target, admin_notes)
            restored = guide.add_days(current.releasable_days(today), today)
            logger.info(
                "Returning days to guide calendar",
                extra={
                    "guide_id": str(guide.id),
                    "hire_id": str(hire_id),
                    "restored": sorted(str(d) for d in restored),
                },
            )
            return PendingCommit(record=current, expected_status=expected_status)

        return self._transaction.execute(record.guide_id, give_back)

    def _find(self, hire_id: HireId) -> HireRecord:
        record = self._repository.find_by_id(hire_id)
        if record is None:
            raise ResourceNotFoundException(f"Hire record not found: {hire_id}")
        return record


def _apply(record: HireRecord, target: HireStatus, admin_notes: str | None) -> None:
    if target == HireStatus.REJECTED:
        record.reject(admin_notes)
    else:
        record.cancel(admin_notes)
