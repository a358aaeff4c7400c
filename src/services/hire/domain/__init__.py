from .entity import HireRecord
from .enum import HireStatus, PaymentStatus
from .exception import AlreadyProcessedError, InvalidTransitionError
from .value_object import HireId, OrderRef, Requester

__all__ = [
    "HireRecord",
    "HireStatus",
    "PaymentStatus",
    "HireId",
    "OrderRef",
    "Requester",
    "AlreadyProcessedError",
    "InvalidTransitionError",
]
