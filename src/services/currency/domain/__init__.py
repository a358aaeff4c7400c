from .exception import UnknownCurrencyError
from .repository import ExchangeRateRepository
from .service import convert, exchange_rate
from .value_object import RateTable

__all__ = [
    "RateTable",
    "ExchangeRateRepository",
    "UnknownCurrencyError",
    "convert",
    "exchange_rate",
]
