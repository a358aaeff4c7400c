from dataclasses import dataclass

from services.hire.applications.create_payable_order import CreatePayableOrderService
from services.hire.domain.entity import HireRecord
from services.hire.domain.gateway import HireNotifier
from services.hire.domain.value_object import OrderRef
from services.shared.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class HireResult:
    """確保に成功した雇用記録と、作成された決済用注文"""

    record: HireRecord
    order: OrderRef | None


def publish_events(notifier: HireNotifier, record: HireRecord) -> None:
    """ドメインイベントを通知する。失敗しても予約は取り消さない"""
    events = record.flush_domain_events()
    if not events:
        return
    try:
        notifier.publish(events)
    except Exception:
        logger.exception(
            "Failed to publish hire events",
            extra={"hire_id": str(record.id), "events": [e.name for e in events]},
        )


def create_order_after_hold(
    order_service: CreatePayableOrderService, record: HireRecord
) -> OrderRef | None:
    """確保後に決済用注文を作成する

    失敗しても確保は維持し、注文は CreatePayableOrderService で再作成できる。
    """
    try:
        return order_service.create_for(record)
    except Exception:
        logger.exception(
            "Failed to create payable order after reservation",
            extra={"hire_id": str(record.id)},
        )
        return None
