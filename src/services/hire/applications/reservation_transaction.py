import os
from dataclasses import dataclass
from typing import Callable

from services.guide.domain.entity import Guide
from services.guide.domain.exception import StaleCalendarException
from services.guide.domain.repository import GuideRepository
from services.guide.domain.value_object import GuideId
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus
from services.hire.domain.repository import ReservationStore
from services.shared.domain.exception import ConflictError, ResourceNotFoundException
from services.shared.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class PendingCommit:
    """原子的単位で書き込む雇用記録と、その書き込み条件"""

    record: HireRecord
    expected_status: HireStatus | None


Unit = Callable[[Guide], PendingCommit]


class ReservationTransaction:
    """ガイドのカレンダーと雇用記録を確認・更新する原子的単位

    1. ガイドを強い整合性で読み直す
    2. unit に最新のガイドを渡し、日付の確保・返却と記録の作成・遷移を行わせる
    3. ReservationStore.commit で version を条件に一括書き込みする

    他のトランザクションが先にカレンダーを書き換えていた場合
    （StaleCalendarException）は 1 から読み直す。unit が送出した例外は
    何も書き込まずにそのまま呼び出し元へ伝わる。
    """

    def __init__(
        self,
        guide_repository: GuideRepository,
        store: ReservationStore,
        max_attempts: int | None = None,
    ) -> None:
        self._guide_repository = guide_repository
        self._store = store
        self._max_attempts = max_attempts or int(os.getenv("MAX_COMMIT_ATTEMPTS", "5"))

    def execute(self, guide_id: GuideId, unit: Unit) -> HireRecord:
        for attempt in range(1, self._max_attempts + 1):
            guide = self._guide_repository.find_by_id(guide_id)
            if guide is None:
                raise ResourceNotFoundException(f"Guide not found: {guide_id}")

            pending = unit(guide)
            try:
                self._store.commit(guide, pending.record, pending.expected_status)
            except StaleCalendarException:
                logger.info(
                    "Guide calendar changed before commit, retrying",
                    extra={
                        "guide_id": str(guide_id),
                        "hire_id": str(pending.record.id),
                        "attempt": attempt,
                    },
                )
                continue

            logger.info(
                "Reservation committed",
                extra={
                    "guide_id": str(guide_id),
                    "hire_id": str(pending.record.id),
                    "status": pending.record.status.value,
                    "attempt": attempt,
                },
            )
            return pending.record

        raise ConflictError(
            f"Calendar of guide {guide_id} is being modified concurrently, "
            f"gave up after {self._max_attempts} attempts"
        )
