from .clock import utc_today
from .http_response import api_response, error_body
from .logger import get_logger
from .validators import to_decimal

__all__ = ["api_response", "error_body", "get_logger", "to_decimal", "utc_today"]
