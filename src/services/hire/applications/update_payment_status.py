from services.hire.domain.entity import HireRecord
from services.hire.domain.exception import AlreadyProcessedError
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId
from services.shared.domain.exception import (
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils.logger import get_logger

logger = get_logger()


class UpdatePaymentStatusService:
    """支払いステータス更新のユースケース（unpaid → paid → refunded）"""

    def __init__(self, repository: HireRecordRepository) -> None:
        self._repository = repository

    def mark_paid(self, hire_id: HireId) -> HireRecord:
        return self._update(hire_id, HireRecord.mark_paid)

    def refund(self, hire_id: HireId) -> HireRecord:
        return self._update(hire_id, HireRecord.refund)

    def _update(self, hire_id: HireId, change) -> HireRecord:
        record = self._repository.find_by_id(hire_id)
        if record is None:
            raise ResourceNotFoundException(f"Hire record not found: {hire_id}")

        expected_payment_status = record.payment_status
        change(record)
        try:
            self._repository.update_payment_status(record, expected_payment_status)
        except OptimisticLockException as e:
            raise AlreadyProcessedError(hire_id) from e

        logger.info(
            "Payment status updated",
            extra={
                "hire_id": str(hire_id),
                "from": expected_payment_status.value,
                "to": record.payment_status.value,
            },
        )
        return record
