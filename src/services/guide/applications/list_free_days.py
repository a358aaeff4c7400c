from dataclasses import dataclass
from decimal import Decimal

from services.guide.domain import GuideId, GuideRepository, to_strings
from services.shared.domain.exception import ResourceNotFoundException


@dataclass(frozen=True)
class GuideAvailability:
    """ガイドの空き日と日額"""

    guide_id: str
    dates: list[str]
    price_per_day: Decimal | None
    currency: str


class ListFreeDaysService:
    """ガイドの空き日一覧を取得するユースケース"""

    def __init__(self, repository: GuideRepository) -> None:
        self._repository = repository

    def list_free_days(self, guide_id: GuideId) -> GuideAvailability:
        guide = self._repository.find_by_id(guide_id)
        if guide is None:
            raise ResourceNotFoundException(f"Guide not found: {guide_id}")
        guide.ensure_hireable()

        return GuideAvailability(
            guide_id=str(guide.id),
            dates=to_strings(guide.list_free_days()),
            price_per_day=guide.price_per_day,
            currency=guide.currency.code,
        )
