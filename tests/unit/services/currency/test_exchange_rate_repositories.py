from decimal import Decimal
from unittest.mock import MagicMock, patch

from services.currency.infrastructure.dynamodb_exchange_rate_repository import (
    DynamoDBExchangeRateRepository,
)
from services.currency.infrastructure.in_memory_exchange_rate_repository import (
    InMemoryExchangeRateRepository,
)
from services.shared.domain import Currency


class TestDynamoDBExchangeRateRepository:
    @patch("services.currency.infrastructure.dynamodb_exchange_rate_repository.boto3")
    def test_builds_rate_table_from_active_items(self, mock_boto3):
        mock_table = MagicMock()
        mock_boto3.resource.return_value.Table.return_value = mock_table
        mock_table.query.return_value = {
            "Items": [
                {"PK": "RATE", "SK": "CURRENCY#USD", "currency": "USD", "rate": Decimal("11.2"), "is_active": True},
                {"PK": "RATE", "SK": "CURRENCY#EUR", "currency": "EUR", "rate": Decimal("12"), "is_active": False},
            ]
        }

        repository = DynamoDBExchangeRateRepository(table_name="test", base_currency="TJS")
        table = repository.get_rate_table()

        assert table.base == Currency("TJS")
        assert table.rate_of(Currency("USD")) == Decimal("11.2")
        assert table.rate_of(Currency("EUR")) is None
        assert mock_table.query.call_args.kwargs["ConsistentRead"] is True


class TestInMemoryExchangeRateRepository:
    def test_set_rate_is_reflected_in_next_snapshot(self):
        repository = InMemoryExchangeRateRepository()
        before = repository.get_rate_table()

        repository.set_rate("USD", "10")

        assert before.rate_of(Currency("USD")) == Decimal("11.0")
        assert repository.get_rate_table().rate_of(Currency("USD")) == Decimal("10")
