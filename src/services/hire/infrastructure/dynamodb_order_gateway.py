import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.hire.domain.gateway import OrderGateway
from services.hire.domain.value_object import HireId, OrderRef
from services.hire.infrastructure.hire_item_mapper import (
    order_key,
    order_to_entity,
    order_to_item,
)
from services.shared.domain import Money
from services.shared.domain.exception import DuplicateResourceException


class DynamoDBOrderGateway(OrderGateway):
    """注文アイテムを DynamoDB に書き込む OrderGateway

    キーが雇用IDから決まるため、同じ雇用に対する2件目の書き込みは条件で弾かれる。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def create_payable_order(self, hire_id: HireId, amount: Money) -> OrderRef:
        """決済用注文を作成する"""
        order = OrderRef.for_hire(hire_id, amount)
        try:
            self.table.put_item(
                Item=order_to_item(order), ConditionExpression=Attr("PK").not_exists()
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Order already exists for hire: {hire_id}"
                )
            raise
        return order

    def find_by_hire_id(self, hire_id: HireId) -> OrderRef | None:
        response = self.table.get_item(Key=order_key(hire_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return order_to_entity(item)
