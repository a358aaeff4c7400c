from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from services.hire.domain.value_object import Requester


class HireRequest(BaseModel):
    """雇用依頼（直接予約・承認待ち依頼共通）のリクエストモデル"""

    model_config = ConfigDict(str_strip_whitespace=True)

    dates: list[str] = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    email: str | None = None
    phone: str | None = None
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    comments: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def _require_contact(self) -> "HireRequest":
        if not self.email and not self.phone:
            raise ValueError("email or phone is required")
        return self

    def to_requester(self) -> Requester:
        return Requester(name=self.name, email=self.email, phone=self.phone)


class SubmitHireRequest(HireRequest):
    """承認待ち依頼のリクエストモデル（ガイドIDをボディで受け取る）"""

    guide_id: str = Field(min_length=1)


class DecisionRequest(BaseModel):
    """承認・却下・キャンセル・完了のリクエストモデル"""

    admin_notes: str | None = Field(default=None, max_length=1000)


class PaymentStatusRequest(BaseModel):
    """支払いステータス更新のリクエストモデル"""

    payment_status: Literal["paid", "refunded"]


class GuideAvailabilityRequest(BaseModel):
    """ガイドの空き日・料金設定のリクエストモデル（指定した項目だけ更新する）"""

    model_config = ConfigDict(str_strip_whitespace=True)

    available_dates: list[str] | None = None
    price_per_day: Decimal | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    is_hireable: bool | None = None

    @model_validator(mode="after")
    def _require_change(self) -> "GuideAvailabilityRequest":
        values = (self.available_dates, self.price_per_day, self.currency, self.is_hireable)
        if all(value is None for value in values):
            raise ValueError("at least one field must be specified")
        return self
