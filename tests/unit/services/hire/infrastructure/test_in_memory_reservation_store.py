import pytest

from services.guide.domain import CalendarDay, StaleCalendarException
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.exception import AlreadyProcessedError
from services.shared.domain.exception import DuplicateResourceException


class TestInMemoryReservationStore:
    def test_commit_bumps_version(self, reservation_store, guide_repository, stored_guide, create_hire_record):
        guide = guide_repository.find_by_id(stored_guide.id)
        guide.remove_days({CalendarDay("2030-01-10")})

        reservation_store.commit(guide, create_hire_record(status=HireStatus.CONFIRMED), None)

        reloaded = guide_repository.find_by_id(stored_guide.id)
        assert reloaded.version == 1
        assert CalendarDay("2030-01-10") not in reloaded.available_dates

    def test_stale_guide_writes_nothing(
        self, reservation_store, guide_repository, hire_repository, stored_guide, create_hire_record
    ):
        first = guide_repository.find_by_id(stored_guide.id)
        second = guide_repository.find_by_id(stored_guide.id)
        reservation_store.commit(first, create_hire_record(hire_id="a"), None)

        second.remove_days({CalendarDay("2030-01-11")})
        with pytest.raises(StaleCalendarException):
            reservation_store.commit(second, create_hire_record(hire_id="b"), None)

        assert CalendarDay("2030-01-11") in guide_repository.find_by_id(stored_guide.id).available_dates
        assert hire_repository.find_by_id(create_hire_record(hire_id="b").id) is None

    def test_duplicate_record(self, reservation_store, guide_repository, stored_guide, create_hire_record):
        reservation_store.commit(guide_repository.find_by_id(stored_guide.id), create_hire_record(), None)
        with pytest.raises(DuplicateResourceException):
            reservation_store.commit(guide_repository.find_by_id(stored_guide.id), create_hire_record(), None)

    def test_status_mismatch(self, reservation_store, guide_repository, hire_repository, stored_guide, create_hire_record):
        hire_repository.save(create_hire_record(status=HireStatus.APPROVED))
        with pytest.raises(AlreadyProcessedError):
            reservation_store.commit(
                guide_repository.find_by_id(stored_guide.id),
                create_hire_record(status=HireStatus.APPROVED),
                HireStatus.PENDING,
            )
        assert guide_repository.find_by_id(stored_guide.id).version == 0

    def test_transition_keeps_payment_status_stored_meanwhile(
        self, reservation_store, guide_repository, hire_repository, stored_guide, create_hire_record
    ):
        hire_repository.save(create_hire_record(status=HireStatus.PENDING))
        approving = hire_repository.find_by_id(create_hire_record().id)
        paying = hire_repository.find_by_id(create_hire_record().id)
        paying.mark_paid()
        hire_repository.update_payment_status(paying, PaymentStatus.UNPAID)

        approving.approve("ok")
        reservation_store.commit(
            guide_repository.find_by_id(stored_guide.id), approving, HireStatus.PENDING
        )

        stored = hire_repository.find_by_id(approving.id)
        assert stored.status == HireStatus.APPROVED
        assert stored.admin_notes == "ok"
        assert stored.payment_status == PaymentStatus.PAID
