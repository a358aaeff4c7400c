from .exchange_rate_repository import ExchangeRateRepository

__all__ = ["ExchangeRateRepository"]
