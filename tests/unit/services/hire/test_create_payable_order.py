from unittest.mock import MagicMock

import pytest

from services.hire.applications.create_payable_order import CreatePayableOrderService
from services.hire.domain.enum import HireStatus
from services.hire.domain.value_object import HireId
from services.shared.domain import Money
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)

HIRE_ID = HireId(value="hire-1")


class TestCreatePayableOrderService:
    def test_creates_order_for_approved_hire(self, order_service, hire_repository, create_hire_record):
        hire_repository.save(create_hire_record(status=HireStatus.APPROVED, total_amount="750"))

        order = order_service.create(HIRE_ID)

        assert order.hire_id == HIRE_ID
        assert order.amount == Money.of("750", "TJS")

    def test_retry_returns_the_same_order(self, order_service, hire_repository, create_hire_record):
        hire_repository.save(create_hire_record(status=HireStatus.CONFIRMED))

        first = order_service.create(HIRE_ID)
        second = order_service.create(HIRE_ID)

        assert first.order_number == second.order_number

    @pytest.mark.parametrize(
        "status", [HireStatus.PENDING, HireStatus.REJECTED, HireStatus.CANCELLED]
    )
    def test_requires_approved_or_confirmed(self, order_service, hire_repository, create_hire_record, status):
        hire_repository.save(create_hire_record(status=status))
        with pytest.raises(BusinessRuleViolationException):
            order_service.create(HIRE_ID)

    def test_requires_positive_price(self, order_service, hire_repository, create_hire_record):
        hire_repository.save(create_hire_record(status=HireStatus.APPROVED, total_amount="0"))
        with pytest.raises(BusinessRuleViolationException):
            order_service.create(HIRE_ID)

    def test_unknown_hire(self, order_service):
        with pytest.raises(ResourceNotFoundException):
            order_service.create(HireId(value="missing"))

    def test_concurrently_created_order_is_returned(self, create_hire_record):
        existing = MagicMock()
        gateway = MagicMock()
        gateway.find_by_hire_id.side_effect = [None, existing]
        gateway.create_payable_order.side_effect = DuplicateResourceException("exists")
        service = CreatePayableOrderService(repository=MagicMock(), order_gateway=gateway)

        order = service.create_for(create_hire_record(status=HireStatus.APPROVED))

        assert order is existing
