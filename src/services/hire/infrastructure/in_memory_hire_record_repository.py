from services.guide.domain.value_object import GuideId
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId
from services.hire.infrastructure.hire_item_mapper import (
    hire_key,
    payment_attributes,
    status_attributes,
    to_entity,
    to_item,
)
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from services.shared.infrastructure.in_memory_table import (
    ConditionalCheckFailed,
    InMemoryTable,
)


def _key(hire_id: HireId) -> tuple[str, str]:
    key = hire_key(hire_id)
    return key["PK"], key["SK"]


class InMemoryHireRecordRepository(HireRecordRepository):
    """InMemoryTable を使用した HireRecordRepository（ローカル実行・テスト用）"""

    def __init__(self, table: InMemoryTable) -> None:
        self._table = table

    def save(self, record: HireRecord) -> None:
        try:
            self._table.put(
                _key(record.id), to_item(record), condition=lambda current: current is None
            )
        except ConditionalCheckFailed:
            raise DuplicateResourceException(f"Hire record already exists: {record.id}")

    def find_by_id(self, hire_id: HireId) -> HireRecord | None:
        item = self._table.get(_key(hire_id))
        if item is None:
            return None
        return to_entity(item)

    def find_by_guide_id(self, guide_id: GuideId) -> list[HireRecord]:
        return self._query("GSI1PK", f"GUIDE#{guide_id}")

    def find_by_requester_id(self, requester_id: str) -> list[HireRecord]:
        return self._query("GSI2PK", f"REQUESTER#{requester_id}")

    def update_status(self, record: HireRecord, expected_status: HireStatus) -> None:
        self._update_field(
            record, "status", expected_status.value, status_attributes(record)
        )

    def update_payment_status(
        self, record: HireRecord, expected_payment_status: PaymentStatus
    ) -> None:
        self._update_field(
            record,
            "payment_status",
            expected_payment_status.value,
            payment_attributes(record),
        )

    def _update_field(
        self, record: HireRecord, name: str, expected: str, attributes: dict
    ) -> None:
        def condition(current: dict | None) -> bool:
            return current is not None and current[name] == expected

        try:
            self._table.update(_key(record.id), attributes, condition=condition)
        except ConditionalCheckFailed:
            raise OptimisticLockException(
                f"Hire record {name} conflict: expected {expected}, hire_id={record.id}"
            )

    def _query(self, index_key: str, value: str) -> list[HireRecord]:
        items = self._table.query(lambda item: item.get(index_key) == value)
        items.sort(key=lambda item: item["created_at"], reverse=True)
        return [to_entity(item) for item in items]
