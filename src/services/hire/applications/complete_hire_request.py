from services.hire.applications.post_commit import publish_events
from services.hire.domain.entity import HireRecord
from services.hire.domain.exception import AlreadyProcessedError
from services.hire.domain.gateway import HireNotifier
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId
from services.shared.domain.exception import (
    OptimisticLockException,
    ResourceNotFoundException,
)


class CompleteHireRequestService:
    """ガイド業務の完了を記録するユースケース（確保した日は戻さない）"""

    def __init__(self, repository: HireRecordRepository, notifier: HireNotifier) -> None:
        self._repository = repository
        self._notifier = notifier

    def complete(self, hire_id: HireId, admin_notes: str | None = None) -> HireRecord:
        record = self._repository.find_by_id(hire_id)
        if record is None:
            raise ResourceNotFoundException(f"Hire record not found: {hire_id}")

        expected_status = record.status
        record.complete(admin_notes)
        try:
            self._repository.update_status(record, expected_status)
        except OptimisticLockException as e:
            raise AlreadyProcessedError(hire_id) from e

        publish_events(self._notifier, record)
        return record
