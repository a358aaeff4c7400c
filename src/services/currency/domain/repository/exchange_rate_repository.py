from abc import ABC, abstractmethod

from services.currency.domain.value_object import RateTable


class ExchangeRateRepository(ABC):
    """為替レート表（読み取り専用）のインターフェース"""

    @abstractmethod
    def get_rate_table(self) -> RateTable:
        """有効なレートのスナップショットを取得する"""
        raise NotImplementedError
