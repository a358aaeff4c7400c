from services.guide.domain.entity import Guide
from services.guide.domain.exception import StaleCalendarException
from services.guide.domain.value_object import to_strings
from services.guide.infrastructure.guide_item_mapper import guide_key
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus
from services.hire.domain.exception import AlreadyProcessedError
from services.hire.domain.repository import ReservationStore
from services.hire.infrastructure.hire_item_mapper import (
    hire_key,
    status_attributes,
    to_item,
)
from services.shared.domain.exception import DuplicateResourceException
from services.shared.infrastructure.in_memory_table import (
    ConditionalCheckFailed,
    InMemoryTable,
    TransactWrite,
)


def _as_tuple(key: dict) -> tuple[str, str]:
    return key["PK"], key["SK"]


class InMemoryReservationStore(ReservationStore):
    """InMemoryTable.transact でカレンダーと雇用記録を同時に書き込む"""

    def __init__(self, table: InMemoryTable) -> None:
        self._table = table

    def commit(
        self,
        guide: Guide,
        record: HireRecord,
        expected_status: HireStatus | None,
    ) -> None:
        expected_version = guide.version

        def guide_unchanged(current: dict | None) -> bool:
            return current is not None and current["version"] == expected_version

        def record_matches(current: dict | None) -> bool:
            if expected_status is None:
                return current is None
            return current is not None and current["status"] == expected_status.value

        writes = [
            TransactWrite(
                key=_as_tuple(guide_key(guide.id)),
                attributes={
                    "available_dates": to_strings(guide.available_dates),
                    "version": expected_version + 1,
                },
                condition=guide_unchanged,
                replace=False,
            ),
            TransactWrite(
                key=_as_tuple(hire_key(record.id)),
                attributes=to_item(record)
                if expected_status is None
                else status_attributes(record),
                condition=record_matches,
                replace=expected_status is None,
            ),
        ]
        try:
            self._table.transact(writes)
        except ConditionalCheckFailed as e:
            if e.index == 0:
                raise StaleCalendarException(
                    f"Guide calendar was modified concurrently: "
                    f"guide_id={guide.id}, version={expected_version}"
                )
            if expected_status is None:
                raise DuplicateResourceException(f"Hire record already exists: {record.id}")
            raise AlreadyProcessedError(record.id)
