from enum import Enum


class PaymentStatus(str, Enum):
    """支払いステータス"""

    UNPAID = "unpaid"
    PAID = "paid"
    REFUNDED = "refunded"

    def can_transition_to(self, target: "PaymentStatus") -> bool:
        return target in PAYMENT_TRANSITIONS[self]


PAYMENT_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.UNPAID: frozenset({PaymentStatus.PAID}),
    PaymentStatus.PAID: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.REFUNDED: frozenset(),
}
