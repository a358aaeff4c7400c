import os

import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.guide.domain.entity import Guide
from services.guide.domain.exception import StaleCalendarException
from services.guide.domain.value_object import to_strings
from services.guide.infrastructure.guide_item_mapper import guide_key
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus
from services.hire.domain.exception import AlreadyProcessedError
from services.hire.domain.repository import ReservationStore
from services.hire.infrastructure.hire_item_mapper import (
    hire_key,
    set_expression,
    status_attributes,
    to_item,
)
from services.shared.domain.exception import DuplicateResourceException

_GUIDE_INDEX = 0
_RECORD_INDEX = 1


class DynamoDBReservationStore(ReservationStore):
    """TransactWriteItems でカレンダーと雇用記録を同時に書き込む

    ガイドのアイテムは version による比較交換、雇用記録は存在有無または
    ステータスを条件にする。どちらかの条件が外れればトランザクション全体が
    取り消される。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.client = boto3.client("dynamodb")
        self._serializer = TypeSerializer()

    def commit(
        self,
        guide: Guide,
        record: HireRecord,
        expected_status: HireStatus | None,
    ) -> None:
        """カレンダーと雇用記録を1トランザクションで書き込む"""
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {"Update": self._guide_update(guide)},
                    self._record_write(record, expected_status),
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] != "TransactionCanceledException":
                raise
            reasons = e.response.get("CancellationReasons", [])
            if self._failed(reasons, _GUIDE_INDEX):
                raise StaleCalendarException(
                    f"Guide calendar was modified concurrently: "
                    f"guide_id={guide.id}, version={guide.version}"
                )
            if self._failed(reasons, _RECORD_INDEX):
                if expected_status is None:
                    raise DuplicateResourceException(
                        f"Hire record already exists: {record.id}"
                    )
                raise AlreadyProcessedError(record.id)
            raise

    def _guide_update(self, guide: Guide) -> dict:
        return {
            "TableName": self.table_name,
            "Key": self._serialize(guide_key(guide.id)),
            "UpdateExpression": "SET available_dates = :dates, #version = :next",
            "ConditionExpression": "#version = :expected",
            "ExpressionAttributeNames": {"#version": "version"},
            "ExpressionAttributeValues": self._serialize(
                {
                    ":dates": to_strings(guide.available_dates),
                    ":next": guide.version + 1,
                    ":expected": guide.version,
                }
            ),
        }

    def _record_write(
        self, record: HireRecord, expected_status: HireStatus | None
    ) -> dict:
        if expected_status is None:
            return {
                "Put": {
                    "TableName": self.table_name,
                    "Item": self._serialize(to_item(record)),
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }

        # 遷移はステータス関連の属性だけを書き換え、支払いステータスは保持する
        expression, names, values = set_expression(status_attributes(record))
        values[":expected_status"] = expected_status.value
        return {
            "Update": {
                "TableName": self.table_name,
                "Key": self._serialize(hire_key(record.id)),
                "UpdateExpression": expression,
                "ConditionExpression": "#status = :expected_status",
                "ExpressionAttributeNames": names,
                "ExpressionAttributeValues": self._serialize(values),
            }
        }

    def _serialize(self, values: dict) -> dict:
        return {k: self._serializer.serialize(v) for k, v in values.items()}

    @staticmethod
    def _failed(reasons: list[dict], index: int) -> bool:
        return (
            len(reasons) > index
            and reasons[index].get("Code") == "ConditionalCheckFailed"
        )
