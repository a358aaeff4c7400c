from unittest.mock import MagicMock

import pytest

from services.guide.domain import GuideId
from services.hire.applications.get_hire_history import GetHireHistoryService
from services.hire.applications.update_payment_status import UpdatePaymentStatusService
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.exception import AlreadyProcessedError, InvalidTransitionError
from services.hire.domain.value_object import HireId, Requester
from services.shared.domain.exception import OptimisticLockException

HIRE_ID = HireId(value="hire-1")


class TestUpdatePaymentStatusService:
    def test_mark_paid_then_refund(self, hire_repository, create_hire_record):
        hire_repository.save(create_hire_record(status=HireStatus.CONFIRMED))
        service = UpdatePaymentStatusService(repository=hire_repository)

        service.mark_paid(HIRE_ID)
        assert hire_repository.find_by_id(HIRE_ID).payment_status == PaymentStatus.PAID

        service.refund(HIRE_ID)
        assert hire_repository.find_by_id(HIRE_ID).payment_status == PaymentStatus.REFUNDED

    def test_refund_unpaid_is_invalid(self, hire_repository, create_hire_record):
        hire_repository.save(create_hire_record())
        service = UpdatePaymentStatusService(repository=hire_repository)
        with pytest.raises(InvalidTransitionError):
            service.refund(HIRE_ID)

    def test_update_is_conditioned_on_previous_payment_status(self, create_hire_record):
        repository = MagicMock()
        repository.find_by_id.return_value = create_hire_record()
        repository.update_payment_status.side_effect = OptimisticLockException("changed")
        service = UpdatePaymentStatusService(repository=repository)

        with pytest.raises(AlreadyProcessedError):
            service.mark_paid(HIRE_ID)

        record, expected = repository.update_payment_status.call_args.args
        assert expected == PaymentStatus.UNPAID
        assert record.payment_status == PaymentStatus.PAID


class TestGetHireHistoryService:
    @pytest.fixture
    def stored_history(self, hire_repository, create_hire_record):
        other = Requester(name="Madina", phone="+992111")
        for i in range(5):
            hire_repository.save(
                create_hire_record(
                    hire_id=f"hire-{i}",
                    created_at=f"2029-12-0{i + 1}T00:00:00+00:00",
                    hire_requester=other if i == 4 else None,
                )
            )
        hire_repository.save(create_hire_record(hire_id="hire-x", guide_id="guide-2"))

    def test_by_guide_newest_first(self, hire_repository, stored_history):
        service = GetHireHistoryService(repository=hire_repository)

        page = service.by_guide(GuideId(value="guide-1"), page=1, limit=2)

        assert [str(r.id) for r in page.records] == ["hire-4", "hire-3"]
        assert page.total == 5
        assert page.total_pages == 3

    def test_last_page(self, hire_repository, stored_history):
        service = GetHireHistoryService(repository=hire_repository)

        page = service.by_guide(GuideId(value="guide-1"), page=3, limit=2)

        assert [str(r.id) for r in page.records] == ["hire-0"]

    def test_by_requester_is_case_insensitive(self, hire_repository, stored_history):
        service = GetHireHistoryService(repository=hire_repository)

        page = service.by_requester("RUSTAM@example.com")

        assert page.total == 5
        assert all(r.requester.email == "Rustam@example.com" for r in page.records)

    def test_empty_history(self, hire_repository):
        page = GetHireHistoryService(repository=hire_repository).by_guide(GuideId(value="none"))
        assert page.records == []
        assert page.total_pages == 0

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 101)])
    def test_invalid_paging(self, hire_repository, page, limit):
        service = GetHireHistoryService(repository=hire_repository)
        with pytest.raises(ValueError):
            service.by_guide(GuideId(value="guide-1"), page=page, limit=limit)
