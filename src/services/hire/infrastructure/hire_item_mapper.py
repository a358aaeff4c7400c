"""HireRecord / OrderRef と DynamoDB アイテムの相互変換

- 雇用記録: PK=HIRE#<id>, SK=RECORD
- GSI1: ガイド別（GSI1PK=GUIDE#<guide_id>, GSI1SK=HIRE#<created_at>）
- GSI2: 依頼者別（GSI2PK=REQUESTER#<identity>, GSI2SK=HIRE#<created_at>）
- 注文: PK=ORDER#HIRE#<hire_id>, SK=ORDER（雇用IDごとに1件）
"""

from services.guide.domain.value_object import CalendarDay, GuideId, to_strings
from services.hire.domain.entity import HireRecord
from services.hire.domain.enum import HireStatus, PaymentStatus
from services.hire.domain.value_object import HireId, OrderRef, Requester
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.utils.validators import to_decimal


def hire_key(hire_id: HireId) -> dict:
    return {"PK": f"HIRE#{hire_id}", "SK": "RECORD"}


def order_key(hire_id: HireId) -> dict:
    return {"PK": f"ORDER#HIRE#{hire_id}", "SK": "ORDER"}


def to_item(record: HireRecord) -> dict:
    return {
        **hire_key(record.id),
        "entity_type": "HIRE",
        "hire_id": str(record.id),
        "guide_id": str(record.guide_id),
        "requester_name": record.requester.name,
        "requester_email": record.requester.email,
        "requester_phone": record.requester.phone,
        "requester_id": record.requester.identity,
        "selected_dates": to_strings(record.days),
        "number_of_days": record.number_of_days,
        "total_price": str(record.total_price.amount),
        "currency": str(record.total_price.currency),
        "base_total_price": str(record.base_total_price.amount),
        "base_currency": str(record.base_total_price.currency),
        "exchange_rate": str(record.exchange_rate),
        "status": record.status.value,
        "payment_status": record.payment_status.value,
        "comments": record.comments,
        "admin_notes": record.admin_notes,
        "created_at": str(record.created_at),
        "updated_at": str(record.updated_at),
        "GSI1PK": f"GUIDE#{record.guide_id}",
        "GSI1SK": f"HIRE#{record.created_at}",
        "GSI2PK": f"REQUESTER#{record.requester.identity}",
        "GSI2SK": f"HIRE#{record.created_at}",
    }


def status_attributes(record: HireRecord) -> dict:
    """ステータス遷移で書き換える属性（payment_status は含めない）"""
    return {
        "status": record.status.value,
        "admin_notes": record.admin_notes,
        "updated_at": str(record.updated_at),
    }


def payment_attributes(record: HireRecord) -> dict:
    """支払いステータス更新で書き換える属性（status は含めない）"""
    return {
        "payment_status": record.payment_status.value,
        "updated_at": str(record.updated_at),
    }


def set_expression(attributes: dict) -> tuple[str, dict, dict]:
    """属性辞書から UpdateExpression と名前・値のプレースホルダを組み立てる"""
    names = {f"#{name}": name for name in attributes}
    values = {f":{name}": value for name, value in attributes.items()}
    expression = "SET " + ", ".join(f"#{name} = :{name}" for name in attributes)
    return expression, names, values


def to_entity(item: dict) -> HireRecord:
    return HireRecord(
        id=HireId(value=item["hire_id"]),
        guide_id=GuideId(value=item["guide_id"]),
        requester=Requester(
            name=item["requester_name"],
            email=item.get("requester_email"),
            phone=item.get("requester_phone"),
        ),
        days=[CalendarDay(d) for d in item["selected_dates"]],
        total_price=Money(
            amount=to_decimal(item["total_price"]),
            currency=Currency(item["currency"]),
        ),
        base_total_price=Money(
            amount=to_decimal(item["base_total_price"]),
            currency=Currency(item["base_currency"]),
        ),
        exchange_rate=to_decimal(item.get("exchange_rate", "1")),
        status=HireStatus(item["status"]),
        payment_status=PaymentStatus(item["payment_status"]),
        comments=item.get("comments"),
        admin_notes=item.get("admin_notes"),
        created_at=IsoDateTime.from_string(item["created_at"]),
        updated_at=IsoDateTime.from_string(item["updated_at"]),
    )


def order_to_item(order: OrderRef) -> dict:
    return {
        **order_key(order.hire_id),
        "entity_type": "ORDER",
        "order_number": order.order_number,
        "hire_id": str(order.hire_id),
        "total_amount": str(order.amount.amount),
        "currency": str(order.amount.currency),
        "status": "pending",
        "payment_status": "unpaid",
        "created_at": str(order.created_at),
    }


def order_to_entity(item: dict) -> OrderRef:
    return OrderRef(
        order_number=item["order_number"],
        hire_id=HireId(value=item["hire_id"]),
        amount=Money(
            amount=to_decimal(item["total_amount"]),
            currency=Currency(item["currency"]),
        ),
        created_at=IsoDateTime.from_string(item["created_at"]),
    )
