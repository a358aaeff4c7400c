from .hire_events import (
    HireApproved,
    HireCancelled,
    HireCompleted,
    HireConfirmed,
    HireEvent,
    HireRejected,
)

__all__ = [
    "HireEvent",
    "HireConfirmed",
    "HireApproved",
    "HireRejected",
    "HireCancelled",
    "HireCompleted",
]
