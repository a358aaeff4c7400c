import os
from datetime import date
from decimal import Decimal
from typing import Iterable
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "guide-hire-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "guide-hire-test")

from services.currency.infrastructure.in_memory_exchange_rate_repository import (  # noqa: E402
    InMemoryExchangeRateRepository,
)
from services.guide.domain import CalendarDay, Guide, GuideId  # noqa: E402
from services.guide.infrastructure.in_memory_guide_repository import (  # noqa: E402
    InMemoryGuideRepository,
)
from services.hire.applications.create_payable_order import (  # noqa: E402
    CreatePayableOrderService,
)
from services.hire.applications.reservation_transaction import (  # noqa: E402
    ReservationTransaction,
)
from services.hire.domain.entity import HireRecord  # noqa: E402
from services.hire.domain.enum import HireStatus, PaymentStatus  # noqa: E402
from services.hire.domain.value_object import HireId, Requester  # noqa: E402
from services.hire.infrastructure.in_memory_hire_record_repository import (  # noqa: E402
    InMemoryHireRecordRepository,
)
from services.hire.infrastructure.in_memory_order_gateway import (  # noqa: E402
    InMemoryOrderGateway,
)
from services.hire.infrastructure.in_memory_reservation_store import (  # noqa: E402
    InMemoryReservationStore,
)
from services.shared.domain import Currency, IsoDateTime, Money  # noqa: E402
from services.shared.infrastructure.in_memory_table import InMemoryTable  # noqa: E402

TODAY = date(2030, 1, 1)
DEFAULT_DATES = ("2030-01-10", "2030-01-11", "2030-01-12")


def days_of(*values: str) -> frozenset[CalendarDay]:
    return frozenset(CalendarDay(v) for v in values)


@pytest.fixture
def today():
    """テストで固定する「今日」"""
    return TODAY


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def requester():
    return Requester(name="Rustam", email="Rustam@example.com", phone="+992900000000")


@pytest.fixture
def create_guide():
    """Guide を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        guide_id: str = "guide-1",
        available_dates: Iterable[str] = DEFAULT_DATES,
        price_per_day: Decimal | None = Decimal("500"),
        currency: str = "TJS",
        is_active: bool = True,
        is_hireable: bool = True,
        version: int = 0,
    ) -> Guide:
        return Guide(
            id=GuideId(value=guide_id),
            name="Farrukh",
            currency=Currency(currency),
            price_per_day=price_per_day,
            available_dates=days_of(*available_dates),
            is_active=is_active,
            is_hireable=is_hireable,
            version=version,
        )

    return _factory


@pytest.fixture
def create_hire_record(requester):
    """HireRecord を生成する Factory fixture"""

    def _factory(
        hire_id: str = "hire-1",
        guide_id: str = "guide-1",
        dates: Iterable[str] = ("2030-01-10",),
        status: HireStatus = HireStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.UNPAID,
        total_amount: str = "500",
        created_at: str = "2029-12-01T00:00:00+00:00",
        hire_requester: Requester | None = None,
    ) -> HireRecord:
        return HireRecord(
            id=HireId(value=hire_id),
            guide_id=GuideId(value=guide_id),
            requester=hire_requester or requester,
            days=days_of(*dates),
            total_price=Money.of(total_amount, "TJS"),
            base_total_price=Money.of(total_amount, "TJS"),
            status=status,
            payment_status=payment_status,
            created_at=IsoDateTime.from_string(created_at),
        )

    return _factory


@pytest.fixture
def table():
    return InMemoryTable()


@pytest.fixture
def guide_repository(table):
    return InMemoryGuideRepository(table)


@pytest.fixture
def hire_repository(table):
    return InMemoryHireRecordRepository(table)


@pytest.fixture
def reservation_store(table):
    return InMemoryReservationStore(table)


@pytest.fixture
def order_gateway(table):
    return InMemoryOrderGateway(table)


@pytest.fixture
def rate_repository():
    return InMemoryExchangeRateRepository()


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def transaction(guide_repository, reservation_store):
    return ReservationTransaction(
        guide_repository=guide_repository, store=reservation_store, max_attempts=5
    )


@pytest.fixture
def order_service(hire_repository, order_gateway):
    return CreatePayableOrderService(
        repository=hire_repository, order_gateway=order_gateway
    )


@pytest.fixture
def stored_guide(create_guide, guide_repository):
    """保存済みのガイド（空き日 2030-01-10〜12、日額 500 TJS）"""
    guide = create_guide()
    guide_repository.save(guide)
    return guide
