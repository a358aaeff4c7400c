"""Guide 集約と DynamoDB アイテムの相互変換

available_dates は空集合を保存できる List 型で持つ（String Set は空にできない）。
"""

from services.guide.domain.entity import Guide
from services.guide.domain.value_object import CalendarDay, GuideId, to_strings
from services.shared.domain import Currency
from services.shared.utils.validators import to_decimal


def guide_key(guide_id: GuideId) -> dict:
    return {"PK": f"GUIDE#{guide_id}", "SK": "PROFILE"}


def to_item(guide: Guide) -> dict:
    return {
        **guide_key(guide.id),
        "entity_type": "GUIDE",
        "guide_id": str(guide.id),
        "name": guide.name,
        "currency": str(guide.currency),
        "price_per_day": (
            str(guide.price_per_day) if guide.price_per_day is not None else None
        ),
        "available_dates": to_strings(guide.available_dates),
        "is_active": guide.is_active,
        "is_hireable": guide.is_hireable,
        "version": guide.version,
    }


def to_entity(item: dict) -> Guide:
    price = item.get("price_per_day")
    return Guide(
        id=GuideId(value=item["guide_id"]),
        name=item.get("name", ""),
        currency=Currency(item.get("currency") or "TJS"),
        price_per_day=to_decimal(price) if price is not None else None,
        available_dates=[CalendarDay(d) for d in item.get("available_dates", [])],
        is_active=bool(item.get("is_active", True)),
        is_hireable=bool(item.get("is_hireable", False)),
        version=int(item.get("version", 0)),
    )
