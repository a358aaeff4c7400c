from .hire_notifier import HireNotifier
from .order_gateway import OrderGateway

__all__ = ["HireNotifier", "OrderGateway"]
