from .hire_record_repository import HireRecordRepository
from .reservation_store import ReservationStore

__all__ = ["HireRecordRepository", "ReservationStore"]
