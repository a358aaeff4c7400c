from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, factor: int) -> Money:
        """数量を掛ける（日数 × 日額など）"""
        return Money(amount=self.amount * factor, currency=self.currency)

    def is_positive(self) -> bool:
        return self.amount > 0

    @classmethod
    def of(cls, amount: Decimal | int | str, currency_code: str) -> Money:
        """数値と通貨コードから Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency(currency_code))
