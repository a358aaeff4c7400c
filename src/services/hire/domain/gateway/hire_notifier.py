from abc import ABC, abstractmethod

from services.hire.domain.event import HireEvent


class HireNotifier(ABC):
    """雇用イベントの通知先（送りっぱなし）"""

    @abstractmethod
    def publish(self, events: list[HireEvent]) -> None:
        raise NotImplementedError
