from abc import ABC, abstractmethod

from services.guide.domain.entity import Guide
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus


class ReservationStore(ABC):
    """カレンダーと雇用記録を1つの原子的単位で書き込むインターフェース"""

    @abstractmethod
    def commit(
        self,
        guide: Guide,
        record: HireRecord,
        expected_status: HireStatus | None,
    ) -> None:
        """guide.available_dates と record を同時に書き込む

        - guide.version が保存済みの値と異なれば StaleCalendarException
        - expected_status が None なら新規作成（既存なら DuplicateResourceException）
        - expected_status と保存済みのステータスが異なれば AlreadyProcessedError
        - 遷移時はステータス・管理者メモだけを書き換え、支払いステータスは保持する
        いずれの失敗でも何も書き込まない。
        """
        raise NotImplementedError
