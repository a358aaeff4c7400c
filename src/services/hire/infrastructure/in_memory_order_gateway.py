from services.hire.domain.gateway import OrderGateway
from services.hire.domain.value_object import HireId, OrderRef
from services.hire.infrastructure.hire_item_mapper import (
    order_key,
    order_to_entity,
    order_to_item,
)
from services.shared.domain import Money
from services.shared.domain.exception import DuplicateResourceException
from services.shared.infrastructure.in_memory_table import (
    ConditionalCheckFailed,
    InMemoryTable,
)


class InMemoryOrderGateway(OrderGateway):
    """InMemoryTable に注文を書き込む OrderGateway（ローカル実行・テスト用）"""

    def __init__(self, table: InMemoryTable) -> None:
        self._table = table

    def create_payable_order(self, hire_id: HireId, amount: Money) -> OrderRef:
        order = OrderRef.for_hire(hire_id, amount)
        key = order_key(hire_id)
        try:
            self._table.put(
                (key["PK"], key["SK"]),
                order_to_item(order),
                condition=lambda current: current is None,
            )
        except ConditionalCheckFailed:
            raise DuplicateResourceException(f"Order already exists for hire: {hire_id}")
        return order

    def find_by_hire_id(self, hire_id: HireId) -> OrderRef | None:
        key = order_key(hire_id)
        item = self._table.get((key["PK"], key["SK"]))
        if item is None:
            return None
        return order_to_entity(item)
