from decimal import Decimal

import pytest

from services.currency.domain import RateTable, UnknownCurrencyError
from services.guide.domain import CalendarDay, GuideNotHireableError
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.factory import HireDetails, HireRecordFactory
from services.shared.domain import Money


@pytest.fixture
def rate_table():
    return RateTable.from_codes("TJS", {"USD": "11", "EUR": "12"})


@pytest.fixture
def details(requester) -> HireDetails:
    return {"requester": requester, "display_currency": "USD", "comments": "Pamir trip"}


DAYS = frozenset({CalendarDay("2030-01-10"), CalendarDay("2030-01-11")})


class TestHireRecordFactory:
    def test_create_confirmed_converts_price(self, create_guide, details, rate_table):
        record = HireRecordFactory().create_confirmed(create_guide(), DAYS, details, rate_table)

        assert record.status == HireStatus.CONFIRMED
        assert record.payment_status == PaymentStatus.UNPAID
        assert record.base_total_price == Money.of("1000", "TJS")
        assert record.total_price == Money.of("90.91", "USD")
        assert record.exchange_rate == Decimal("0.090909")
        assert record.comments == "Pamir trip"
        assert record.days == DAYS

    def test_create_confirmed_records_event(self, create_guide, details, rate_table):
        record = HireRecordFactory().create_confirmed(create_guide(), DAYS, details, rate_table)
        assert [e.name for e in record.flush_domain_events()] == ["HireConfirmed"]

    def test_display_currency_defaults_to_guide_currency(self, create_guide, requester, rate_table):
        details: HireDetails = {"requester": requester, "display_currency": None, "comments": None}

        record = HireRecordFactory().create_pending(create_guide(), DAYS, details, rate_table)

        assert record.status == HireStatus.PENDING
        assert record.total_price == Money.of("1000", "TJS")
        assert record.exchange_rate == Decimal("1")

    def test_unknown_display_currency(self, create_guide, requester, rate_table):
        details: HireDetails = {"requester": requester, "display_currency": "GBP", "comments": None}
        with pytest.raises(UnknownCurrencyError):
            HireRecordFactory().create_pending(create_guide(), DAYS, details, rate_table)

    def test_guide_without_price(self, create_guide, details, rate_table):
        with pytest.raises(GuideNotHireableError):
            HireRecordFactory().create_pending(
                create_guide(price_per_day=None), DAYS, details, rate_table
            )
