from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from services.guide.domain import StaleCalendarException
from services.hire.domain.enum import HireStatus
from services.hire.domain.exception import AlreadyProcessedError
from services.hire.infrastructure.dynamodb_reservation_store import (
    DynamoDBReservationStore,
)
from services.shared.domain.exception import DuplicateResourceException


def _cancelled(*codes: str) -> ClientError:
    return ClientError(
        {
            "Error": {"Code": "TransactionCanceledException", "Message": "cancelled"},
            "CancellationReasons": [{"Code": code} for code in codes],
        },
        "TransactWriteItems",
    )


class TestDynamoDBReservationStore:
    @pytest.fixture
    def mock_client(self):
        with patch(
            "services.hire.infrastructure.dynamodb_reservation_store.boto3"
        ) as mock_boto3:
            client = MagicMock()
            mock_boto3.client.return_value = client
            yield client

    @pytest.fixture
    def store(self, mock_client):
        return DynamoDBReservationStore(table_name="guide-hire")

    def test_writes_calendar_and_record_in_one_transaction(
        self, store, mock_client, create_guide, create_hire_record
    ):
        guide = create_guide(available_dates=["2030-01-11"], version=3)

        store.commit(guide, create_hire_record(status=HireStatus.CONFIRMED), None)

        items = mock_client.transact_write_items.call_args.kwargs["TransactItems"]
        update = items[0]["Update"]
        assert update["TableName"] == "guide-hire"
        assert update["Key"] == {"PK": {"S": "GUIDE#guide-1"}, "SK": {"S": "PROFILE"}}
        assert update["ConditionExpression"] == "#version = :expected"
        assert update["ExpressionAttributeValues"][":expected"] == {"N": "3"}
        assert update["ExpressionAttributeValues"][":next"] == {"N": "4"}
        assert update["ExpressionAttributeValues"][":dates"] == {"L": [{"S": "2030-01-11"}]}

        put = items[1]["Put"]
        assert put["ConditionExpression"] == "attribute_not_exists(PK)"
        assert put["Item"]["status"] == {"S": "confirmed"}

    def test_transition_is_conditioned_on_expected_status(
        self, store, mock_client, create_guide, create_hire_record
    ):
        record = create_hire_record(status=HireStatus.PENDING)
        record.approve("ok")

        store.commit(create_guide(), record, HireStatus.PENDING)

        write = mock_client.transact_write_items.call_args.kwargs["TransactItems"][1]
        assert "Put" not in write
        update = write["Update"]
        assert update["Key"] == {"PK": {"S": "HIRE#hire-1"}, "SK": {"S": "RECORD"}}
        assert update["ConditionExpression"] == "#status = :expected_status"
        assert update["ExpressionAttributeValues"][":expected_status"] == {"S": "pending"}
        assert update["ExpressionAttributeValues"][":status"] == {"S": "approved"}
        assert set(update["ExpressionAttributeNames"].values()) == {
            "status",
            "admin_notes",
            "updated_at",
        }

    def test_version_mismatch_is_stale_calendar(
        self, store, mock_client, create_guide, create_hire_record
    ):
        mock_client.transact_write_items.side_effect = _cancelled("ConditionalCheckFailed", "None")
        with pytest.raises(StaleCalendarException):
            store.commit(create_guide(), create_hire_record(), None)

    def test_status_mismatch_is_already_processed(
        self, store, mock_client, create_guide, create_hire_record
    ):
        mock_client.transact_write_items.side_effect = _cancelled("None", "ConditionalCheckFailed")
        with pytest.raises(AlreadyProcessedError):
            store.commit(create_guide(), create_hire_record(), HireStatus.PENDING)

    def test_existing_record_is_duplicate(
        self, store, mock_client, create_guide, create_hire_record
    ):
        mock_client.transact_write_items.side_effect = _cancelled("None", "ConditionalCheckFailed")
        with pytest.raises(DuplicateResourceException):
            store.commit(create_guide(), create_hire_record(), None)

    def test_other_errors_propagate(self, store, mock_client, create_guide, create_hire_record):
        mock_client.transact_write_items.side_effect = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
            "TransactWriteItems",
        )
        with pytest.raises(ClientError):
            store.commit(create_guide(), create_hire_record(), None)
