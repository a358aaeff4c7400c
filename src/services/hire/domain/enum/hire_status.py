from enum import Enum


class HireStatus(str, Enum):
    """ガイド雇用ステータス"""

    PENDING = "pending"
    APPROVED = "approved"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: "HireStatus") -> bool:
        return target in TRANSITIONS[self]

    @property
    def holds_days(self) -> bool:
        """カレンダーから日付を確保している状態か"""
        return self in (HireStatus.APPROVED, HireStatus.CONFIRMED)


TRANSITIONS: dict[HireStatus, frozenset[HireStatus]] = {
    HireStatus.PENDING: frozenset({HireStatus.APPROVED, HireStatus.REJECTED}),
    HireStatus.APPROVED: frozenset(
        {HireStatus.COMPLETED, HireStatus.CANCELLED, HireStatus.REJECTED}
    ),
    HireStatus.CONFIRMED: frozenset({HireStatus.COMPLETED, HireStatus.CANCELLED}),
    HireStatus.REJECTED: frozenset(),
    HireStatus.COMPLETED: frozenset(),
    HireStatus.CANCELLED: frozenset(),
}
