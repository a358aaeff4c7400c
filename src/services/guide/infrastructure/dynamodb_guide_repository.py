import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.guide.domain.entity import Guide
from services.guide.domain.exception import StaleCalendarException
from services.guide.domain.repository import GuideRepository
from services.guide.domain.value_object import GuideId
from services.guide.infrastructure.guide_item_mapper import (
    guide_key,
    to_entity,
    to_item,
)
from services.shared.domain.exception import DuplicateResourceException


class DynamoDBGuideRepository(GuideRepository):
    """DynamoDBを使用したGuideRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, guide: Guide) -> None:
        """ガイドを登録する"""
        try:
            self.table.put_item(
                Item=to_item(guide), ConditionExpression=Attr("PK").not_exists()
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Guide already exists: {guide.id}")
            raise

    def find_by_id(self, guide_id: GuideId) -> Guide | None:
        """ガイドIDで検索"""
        response = self.table.get_item(Key=guide_key(guide_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return to_entity(item)

    def update_availability(self, guide: Guide) -> None:
        """空き日・日額・通貨・雇用可否を version 条件付きで更新する"""
        item = to_item(guide)
        try:
            self.table.update_item(
                Key=guide_key(guide.id),
                UpdateExpression=(
                    "SET available_dates = :dates, price_per_day = :price, "
                    "currency = :currency, is_hireable = :hireable, "
                    "#version = :next"
                ),
                ConditionExpression="#version = :expected",
                ExpressionAttributeNames={"#version": "version"},
                ExpressionAttributeValues={
                    ":dates": item["available_dates"],
                    ":price": item["price_per_day"],
                    ":currency": item["currency"],
                    ":hireable": item["is_hireable"],
                    ":next": guide.version + 1,
                    ":expected": guide.version,
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise StaleCalendarException(
                    f"Guide calendar was modified concurrently: "
                    f"guide_id={guide.id}, version={guide.version}"
                )
            raise
