from __future__ import annotations

import time
from dataclasses import dataclass

from services.hire.domain.value_object.hire_id import HireId
from services.shared.domain import IsoDateTime, Money


@dataclass(frozen=True)
class OrderRef:
    """決済用注文の参照（注文サブシステムへの受け渡し結果）"""

    order_number: str
    hire_id: HireId
    amount: Money
    created_at: IsoDateTime

    @classmethod
    def for_hire(cls, hire_id: HireId, amount: Money) -> OrderRef:
        """GUIDE-<epoch ミリ秒>-<雇用ID> 形式の注文番号で生成する"""
        return cls(
            order_number=f"GUIDE-{int(time.time() * 1000)}-{hire_id}",
            hire_id=hire_id,
            amount=amount,
            created_at=IsoDateTime.now(),
        )
