from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from services.shared.domain import Currency


@dataclass(frozen=True)
class RateTable:
    """為替レート表のスナップショット

    rates[c] は「通貨 c の 1 単位が基準通貨でいくらか」を表す。
    基準通貨のレートは常に 1。
    """

    base: Currency
    rates: Mapping[Currency, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {c: Decimal(str(r)) for c, r in self.rates.items()}
        for currency, rate in normalized.items():
            if rate <= 0:
                raise ValueError(f"Rate must be positive: {currency}={rate}")
        normalized[self.base] = Decimal("1")
        object.__setattr__(self, "rates", MappingProxyType(normalized))

    def __contains__(self, currency: object) -> bool:
        return currency in self.rates

    def rate_of(self, currency: Currency) -> Decimal | None:
        return self.rates.get(currency)

    @classmethod
    def from_codes(cls, base_code: str, rates: Mapping[str, object]) -> RateTable:
        """{"USD": 11.0, ...} 形式の辞書から生成する"""
        return cls(
            base=Currency(base_code),
            rates={Currency(code): Decimal(str(rate)) for code, rate in rates.items()},
        )
