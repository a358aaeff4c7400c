from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus
from services.hire.domain.gateway import OrderGateway
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId, OrderRef
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from services.shared.utils.logger import get_logger

logger = get_logger()

PAYABLE_STATUSES = (HireStatus.APPROVED, HireStatus.CONFIRMED)


class CreatePayableOrderService:
    """雇用記録から決済用注文を作成するユースケース（雇用IDごとに1件）"""

    def __init__(
        self, repository: HireRecordRepository, order_gateway: OrderGateway
    ) -> None:
        self._repository = repository
        self._order_gateway = order_gateway

    def create(self, hire_id: HireId) -> OrderRef:
        """雇用IDを指定して注文を作成する（作成済みなら既存の注文を返す）"""
        record = self._repository.find_by_id(hire_id)
        if record is None:
            raise ResourceNotFoundException(f"Hire record not found: {hire_id}")
        return self.create_for(record)

    def create_for(self, record: HireRecord) -> OrderRef:
        if record.status not in PAYABLE_STATUSES:
            raise BusinessRuleViolationException(
                f"Hire must be approved before payment. Current status: "
                f"{record.status.value}"
            )
        if not record.total_price.is_positive():
            raise BusinessRuleViolationException(
                f"Hire price is not set: {record.id}"
            )

        existing = self._order_gateway.find_by_hire_id(record.id)
        if existing is not None:
            return existing

        try:
            order = self._order_gateway.create_payable_order(
                record.id, record.total_price
            )
        except DuplicateResourceException:
            # 同時に作成された注文を返す
            order = self._order_gateway.find_by_hire_id(record.id)
            if order is None:
                raise
            return order

        logger.info(
            "Payable order created",
            extra={
                "hire_id": str(record.id),
                "order_number": order.order_number,
                "amount": str(order.amount),
            },
        )
        return order
