from abc import abstractmethod

from services.guide.domain.value_object import GuideId
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.value_object import HireId
from services.shared.domain import Repository


class HireRecordRepository(Repository[HireRecord, HireId]):
    """ガイド雇用記録レポジトリのインターフェース"""

    @abstractmethod
    def save(self, record: HireRecord) -> None:
        """新規の記録を保存する（カレンダーは変更しない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hire_id: HireId) -> HireRecord | None:
        """雇用IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_guide_id(self, guide_id: GuideId) -> list[HireRecord]:
        """ガイドIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_requester_id(self, requester_id: str) -> list[HireRecord]:
        """依頼者IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, record: HireRecord, expected_status: HireStatus) -> None:
        """ステータス・管理者メモを更新する（支払いステータスは書き換えない）

        保存済みのステータスが expected_status と異なれば OptimisticLockException。
        """
        raise NotImplementedError

    @abstractmethod
    def update_payment_status(
        self, record: HireRecord, expected_payment_status: PaymentStatus
    ) -> None:
        """支払いステータスを更新する（ステータスは書き換えない）

        保存済みの支払いステータスが expected_payment_status と異なれば
        OptimisticLockException。
        """
        raise NotImplementedError
