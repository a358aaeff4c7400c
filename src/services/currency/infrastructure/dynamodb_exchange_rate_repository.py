import os

import boto3
from boto3.dynamodb.conditions import Key

from services.currency.domain.repository import ExchangeRateRepository
from services.currency.domain.value_object import RateTable


class DynamoDBExchangeRateRepository(ExchangeRateRepository):
    """DynamoDB の RATE アイテムから為替レート表を組み立てる"""

    def __init__(
        self, table_name: str | None = None, base_currency: str | None = None
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.base_currency = base_currency or os.getenv("BASE_CURRENCY", "TJS")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def get_rate_table(self) -> RateTable:
        """有効なレートのスナップショットを取得する"""
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq("RATE")
            & Key("SK").begins_with("CURRENCY#"),
            ConsistentRead=True,
        )
        rates = {
            item["currency"]: item["rate"]
            for item in response.get("Items", [])
            if item.get("is_active", True)
        }
        return RateTable.from_codes(self.base_currency, rates)
