from datetime import date

import pytest

from services.guide.domain import CalendarDay
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.event import HireApproved, HireCancelled, HireConfirmed
from services.hire.domain.exception import InvalidTransitionError
from services.shared.domain.exception import BusinessRuleViolationException


class TestHireRecordTransitions:
    def test_approve_pending(self, create_hire_record):
        record = create_hire_record(status=HireStatus.PENDING)

        record.approve("looks good")

        assert record.status == HireStatus.APPROVED
        assert record.admin_notes == "looks good"
        events = record.flush_domain_events()
        assert [type(e) for e in events] == [HireApproved]
        assert events[0].days == ("2030-01-10",)

    @pytest.mark.parametrize(
        "status",
        [HireStatus.APPROVED, HireStatus.CONFIRMED, HireStatus.COMPLETED, HireStatus.REJECTED],
    )
    def test_cannot_approve_non_pending(self, create_hire_record, status):
        record = create_hire_record(status=status)
        with pytest.raises(InvalidTransitionError) as exc_info:
            record.approve()
        assert exc_info.value.current == status.value
        assert exc_info.value.target == "approved"
        assert record.status == status

    def test_cancel_confirmed(self, create_hire_record):
        record = create_hire_record(status=HireStatus.CONFIRMED)
        record.cancel()
        assert record.status == HireStatus.CANCELLED
        assert [type(e) for e in record.flush_domain_events()] == [HireCancelled]

    def test_cannot_reject_confirmed(self, create_hire_record):
        record = create_hire_record(status=HireStatus.CONFIRMED)
        with pytest.raises(InvalidTransitionError):
            record.reject()

    def test_cannot_cancel_pending(self, create_hire_record):
        record = create_hire_record(status=HireStatus.PENDING)
        with pytest.raises(InvalidTransitionError):
            record.cancel()

    def test_reject_approved(self, create_hire_record):
        record = create_hire_record(status=HireStatus.APPROVED)
        record.reject()
        assert record.status == HireStatus.REJECTED

    @pytest.mark.parametrize(
        "status", [HireStatus.REJECTED, HireStatus.COMPLETED, HireStatus.CANCELLED]
    )
    def test_terminal_states(self, create_hire_record, status):
        record = create_hire_record(status=status)
        for change in (record.approve, record.reject, record.cancel, record.complete):
            with pytest.raises(InvalidTransitionError):
                change()

    def test_confirm_only_for_direct_hire(self, create_hire_record):
        confirmed = create_hire_record(status=HireStatus.CONFIRMED)
        confirmed.confirm()
        assert [type(e) for e in confirmed.flush_domain_events()] == [HireConfirmed]

        with pytest.raises(InvalidTransitionError):
            create_hire_record(status=HireStatus.PENDING).confirm()


class TestHireRecordPayment:
    def test_paid_then_refunded(self, create_hire_record):
        record = create_hire_record(status=HireStatus.APPROVED)
        record.mark_paid()
        assert record.payment_status == PaymentStatus.PAID
        record.refund()
        assert record.payment_status == PaymentStatus.REFUNDED

    def test_cannot_refund_unpaid(self, create_hire_record):
        with pytest.raises(InvalidTransitionError):
            create_hire_record().refund()

    def test_cannot_pay_twice(self, create_hire_record):
        record = create_hire_record(payment_status=PaymentStatus.PAID)
        with pytest.raises(InvalidTransitionError):
            record.mark_paid()


class TestHireRecordDays:
    def test_days_are_frozen(self, create_hire_record):
        record = create_hire_record(dates=["2030-01-10", "2030-01-11"])
        assert isinstance(record.days, frozenset)
        assert record.number_of_days == 2

    def test_requires_at_least_one_day(self, create_hire_record):
        with pytest.raises(BusinessRuleViolationException):
            create_hire_record(dates=[])

    def test_releasable_days_excludes_past(self, create_hire_record):
        record = create_hire_record(dates=["2030-01-09", "2030-01-10", "2030-01-11"])
        assert record.releasable_days(date(2030, 1, 10)) == {
            CalendarDay("2030-01-10"),
            CalendarDay("2030-01-11"),
        }

    def test_holds_days(self):
        assert HireStatus.APPROVED.holds_days
        assert HireStatus.CONFIRMED.holds_days
        assert not HireStatus.PENDING.holds_days
        assert not HireStatus.CANCELLED.holds_days

    def test_is_aggregate(self, create_hire_record):
        assert isinstance(create_hire_record(), HireRecord)
