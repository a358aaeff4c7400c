from dataclasses import asdict, dataclass, field

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class HireEvent:
    """雇用記録のドメインイベント基底"""

    hire_id: str
    guide_id: str
    days: tuple[str, ...]
    occurred_at: str = field(default_factory=lambda: str(IsoDateTime.now()))

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_detail(self) -> dict:
        detail = asdict(self)
        detail["days"] = list(self.days)
        return detail


@dataclass(frozen=True)
class HireConfirmed(HireEvent):
    """直接予約が確定した"""


@dataclass(frozen=True)
class HireApproved(HireEvent):
    """依頼が承認され日付が確保された"""


@dataclass(frozen=True)
class HireRejected(HireEvent):
    """依頼が却下された"""


@dataclass(frozen=True)
class HireCancelled(HireEvent):
    """承認・確定後にキャンセルされた"""


@dataclass(frozen=True)
class HireCompleted(HireEvent):
    """ガイド業務が完了した"""
