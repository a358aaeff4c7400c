from .hire_id import HireId
from .order_ref import OrderRef
from .requester import Requester

__all__ = ["HireId", "OrderRef", "Requester"]
