from .pricing_converter import convert, exchange_rate

__all__ = ["convert", "exchange_rate"]
