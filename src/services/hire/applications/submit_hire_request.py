from datetime import date
from typing import Callable, Iterable

from services.currency.domain import ExchangeRateRepository
from services.guide.domain import (
    DatesUnavailableError,
    GuideId,
    GuideRepository,
    parse_day_selection,
)
from services.hire.domain.entity import HireRecord
from services.hire.domain.factory import HireDetails, HireRecordFactory
from services.hire.domain.repository import HireRecordRepository
from services.hire.domain.value_object import Requester
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.clock import utc_today
from services.shared.utils.logger import get_logger

logger = get_logger()


class SubmitHireRequestService:
    """承認待ちの雇用依頼を登録するユースケース

    カレンダーは変更しない。空き状況は受付時点の参考チェックのみで、
    実際の確保は承認時に行う。
    """

    def __init__(
        self,
        guide_repository: GuideRepository,
        repository: HireRecordRepository,
        factory: HireRecordFactory,
        rate_repository: ExchangeRateRepository,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._guide_repository = guide_repository
        self._repository = repository
        self._factory = factory
        self._rate_repository = rate_repository
        self._today = today

    def submit(
        self,
        guide_id: GuideId,
        days: Iterable[str],
        requester: Requester,
        display_currency: str | None = None,
        comments: str | None = None,
    ) -> HireRecord:
        selection = parse_day_selection(days, self._today())

        guide = self._guide_repository.find_by_id(guide_id)
        if guide is None:
            raise ResourceNotFoundException(f"Guide not found: {guide_id}")
        guide.ensure_hireable()

        unavailable = guide.unavailable_of(selection)
        if unavailable:
            raise DatesUnavailableError(unavailable)

        details: HireDetails = {
            "requester": requester,
            "display_currency": display_currency,
            "comments": comments,
        }
        record = self._factory.create_pending(
            guide, selection, details, self._rate_repository.get_rate_table()
        )
        self._repository.save(record)

        logger.info(
            "Hire request submitted",
            extra={
                "guide_id": str(guide_id),
                "hire_id": str(record.id),
                "days": len(selection),
            },
        )
        return record
