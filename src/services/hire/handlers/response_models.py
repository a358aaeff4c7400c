from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from services.guide.domain.entity import Guide
from services.guide.domain.value_object import to_strings
from services.hire.applications.get_hire_history import HireHistoryPage
from services.hire.applications.post_commit import HireResult
from services.hire.domain.entity import HireRecord
from services.hire.domain.value_object import OrderRef

DataT = TypeVar("DataT")


class HireRecordData(BaseModel):
    """雇用記録のレスポンスモデル"""

    hire_id: str
    guide_id: str
    requester_name: str
    requester_email: str | None
    requester_phone: str | None
    dates: list[str]
    number_of_days: int
    total_price: str
    currency: str
    base_total_price: str
    base_currency: str
    exchange_rate: str
    status: str
    payment_status: str
    comments: str | None
    admin_notes: str | None
    created_at: str
    updated_at: str


class OrderData(BaseModel):
    """決済用注文のレスポンスモデル"""

    order_number: str
    hire_id: str
    amount: str
    currency: str
    created_at: str


class HireData(BaseModel):
    """日付確保を伴う操作のレスポンスモデル（注文作成に失敗した場合 order は None）"""

    hire: HireRecordData
    order: OrderData | None


class HireHistoryData(BaseModel):
    hires: list[HireRecordData]
    page: int
    limit: int
    total: int
    total_pages: int


class GuideSettingsData(BaseModel):
    """ガイドの空き日・料金設定のレスポンスモデル"""

    guide_id: str
    available_dates: list[str]
    price_per_day: str | None
    currency: str
    is_hireable: bool


class SuccessResponse(BaseModel, Generic[DataT]):
    """成功レスポンスモデル"""

    status: str = "success"
    data: DataT


def to_record_data(record: HireRecord) -> HireRecordData:
    return HireRecordData(
        hire_id=str(record.id),
        guide_id=str(record.guide_id),
        requester_name=record.requester.name,
        requester_email=record.requester.email,
        requester_phone=record.requester.phone,
        dates=to_strings(record.days),
        number_of_days=record.number_of_days,
        total_price=str(record.total_price.amount),
        currency=str(record.total_price.currency),
        base_total_price=str(record.base_total_price.amount),
        base_currency=str(record.base_total_price.currency),
        exchange_rate=str(record.exchange_rate),
        status=record.status.value,
        payment_status=record.payment_status.value,
        comments=record.comments,
        admin_notes=record.admin_notes,
        created_at=str(record.created_at),
        updated_at=str(record.updated_at),
    )


def to_order_data(order: OrderRef) -> OrderData:
    return OrderData(
        order_number=order.order_number,
        hire_id=str(order.hire_id),
        amount=str(order.amount.amount),
        currency=str(order.amount.currency),
        created_at=str(order.created_at),
    )


def record_response(record: HireRecord) -> dict:
    """HireRecord をレスポンス辞書に変換する"""
    return SuccessResponse[HireRecordData](data=to_record_data(record)).model_dump()


def hire_response(result: HireResult) -> dict:
    """HireResult をレスポンス辞書に変換する"""
    order = to_order_data(result.order) if result.order is not None else None
    return SuccessResponse[HireData](
        data=HireData(hire=to_record_data(result.record), order=order)
    ).model_dump()


def order_response(order: OrderRef) -> dict:
    return SuccessResponse[OrderData](data=to_order_data(order)).model_dump()


def history_response(page: HireHistoryPage) -> dict:
    """履歴ページをレスポンス辞書に変換する"""
    return SuccessResponse[HireHistoryData](
        data=HireHistoryData(
            hires=[to_record_data(record) for record in page.records],
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )
    ).model_dump()


def guide_settings_response(guide: Guide) -> dict:
    """ガイドの設定をレスポンス辞書に変換する"""
    price = guide.price_per_day
    return SuccessResponse[GuideSettingsData](
        data=GuideSettingsData(
            guide_id=str(guide.id),
            available_dates=to_strings(guide.available_dates),
            price_per_day=str(price) if price is not None else None,
            currency=str(guide.currency),
            is_hireable=guide.is_hireable,
        )
    ).model_dump()
