from typing import Mapping

from services.currency.domain.repository import ExchangeRateRepository
from services.currency.domain.value_object import RateTable

DEFAULT_RATES: dict[str, str] = {
    "TJS": "1",
    "USD": "11.0",
    "EUR": "12.0",
    "RUB": "0.12",
    "CNY": "1.5",
}


class InMemoryExchangeRateRepository(ExchangeRateRepository):
    """固定レートを返す実装（ローカル実行・テスト用）"""

    def __init__(
        self, rates: Mapping[str, object] | None = None, base_currency: str = "TJS"
    ) -> None:
        self._rates = dict(DEFAULT_RATES if rates is None else rates)
        self._base_currency = base_currency

    def set_rate(self, currency_code: str, rate: object) -> None:
        self._rates[currency_code] = rate

    def get_rate_table(self) -> RateTable:
        return RateTable.from_codes(self._base_currency, self._rates)
