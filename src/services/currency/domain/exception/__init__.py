from .exceptions import UnknownCurrencyError

__all__ = ["UnknownCurrencyError"]
