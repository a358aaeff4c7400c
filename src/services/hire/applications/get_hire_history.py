import math
from dataclasses import dataclass

from services.guide.domain import GuideId
from services.hire.domain.entity import HireRecord
from services.hire.domain.repository import HireRecordRepository

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class HireHistoryPage:
    """新しい順に並んだ雇用記録の1ページ"""

    records: list[HireRecord]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0


class GetHireHistoryService:
    """ガイド別・依頼者別の雇用履歴を取得するユースケース"""

    def __init__(self, repository: HireRecordRepository) -> None:
        self._repository = repository

    def by_guide(
        self, guide_id: GuideId, page: int = 1, limit: int = DEFAULT_LIMIT
    ) -> HireHistoryPage:
        return _paginate(self._repository.find_by_guide_id(guide_id), page, limit)

    def by_requester(
        self, requester_id: str, page: int = 1, limit: int = DEFAULT_LIMIT
    ) -> HireHistoryPage:
        records = self._repository.find_by_requester_id(requester_id.strip().lower())
        return _paginate(records, page, limit)


def _paginate(records: list[HireRecord], page: int, limit: int) -> HireHistoryPage:
    if page < 1:
        raise ValueError("page must be 1 or greater")
    if not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")

    ordered = sorted(records, key=lambda r: r.created_at, reverse=True)
    start = (page - 1) * limit
    return HireHistoryPage(
        records=ordered[start : start + limit],
        page=page,
        limit=limit,
        total=len(ordered),
    )
