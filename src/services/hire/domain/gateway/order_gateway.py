from abc import ABC, abstractmethod

from services.hire.domain.value_object import HireId, OrderRef
from services.shared.domain import Money


class OrderGateway(ABC):
    """決済用注文サブシステムへのインターフェース"""

    @abstractmethod
    def create_payable_order(self, hire_id: HireId, amount: Money) -> OrderRef:
        """注文を作成する。雇用IDごとに1件のみ（既存なら DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_hire_id(self, hire_id: HireId) -> OrderRef | None:
        raise NotImplementedError
