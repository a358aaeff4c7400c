import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.guide.domain.value_object import GuideId
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import HireId
from services.hire.infrastructure.hire_item_mapper import (
    hire_key,
    payment_attributes,
    set_expression,
    status_attributes,
    to_entity,
    to_item,
)
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


class DynamoDBHireRecordRepository(HireRecordRepository):
    """DynamoDBを使用したHireRecordRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, record: HireRecord) -> None:
        """雇用記録をDBに保存する"""
        try:
            self.table.put_item(
                Item=to_item(record), ConditionExpression=Attr("PK").not_exists()
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Hire record already exists: {record.id}"
                )
            raise

    def find_by_id(self, hire_id: HireId) -> HireRecord | None:
        """雇用IDで検索"""
        response = self.table.get_item(Key=hire_key(hire_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return to_entity(item)

    def find_by_guide_id(self, guide_id: GuideId) -> list[HireRecord]:
        """ガイドIDで検索（GSI1）"""
        return self._query_index("GSI1", "GSI1PK", f"GUIDE#{guide_id}")

    def find_by_requester_id(self, requester_id: str) -> list[HireRecord]:
        """依頼者IDで検索（GSI2）"""
        return self._query_index("GSI2", "GSI2PK", f"REQUESTER#{requester_id}")

    def update_status(self, record: HireRecord, expected_status: HireStatus) -> None:
        """ステータス・管理者メモを更新する（payment_status には触れない）"""
        self._update_field(
            record, "status", expected_status.value, status_attributes(record)
        )

    def update_payment_status(
        self, record: HireRecord, expected_payment_status: PaymentStatus
    ) -> None:
        """支払いステータスを更新する（status には触れない）"""
        self._update_field(
            record,
            "payment_status",
            expected_payment_status.value,
            payment_attributes(record),
        )

    def _update_field(
        self, record: HireRecord, name: str, expected: str, attributes: dict
    ) -> None:
        update_expression, names, values = set_expression(attributes)
        try:
            self.table.update_item(
                Key=hire_key(record.id),
                UpdateExpression=update_expression,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ConditionExpression=Attr("PK").exists() & Attr(name).eq(expected),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Hire record {name} conflict: expected {expected}, "
                    f"hire_id={record.id}"
                )
            raise

    def _query_index(self, index_name: str, key_name: str, value: str) -> list:
        items: list[dict] = []
        kwargs: dict = {
            "IndexName": index_name,
            "KeyConditionExpression": Key(key_name).eq(value),
            "ScanIndexForward": False,
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [to_entity(item) for item in items]
