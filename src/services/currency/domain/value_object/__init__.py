from .rate_table import RateTable

__all__ = ["RateTable"]
