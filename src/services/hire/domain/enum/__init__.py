from .hire_status import HireStatus
from .payment_status import PaymentStatus

__all__ = ["HireStatus", "PaymentStatus"]
