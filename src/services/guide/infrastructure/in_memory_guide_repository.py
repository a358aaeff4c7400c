from services.guide.domain.entity import Guide
from services.guide.domain.exception import StaleCalendarException
from services.guide.domain.repository import GuideRepository
from services.guide.domain.value_object import GuideId
from services.guide.infrastructure.guide_item_mapper import (
    guide_key,
    to_entity,
    to_item,
)
from services.shared.domain.exception import DuplicateResourceException
from services.shared.infrastructure.in_memory_table import (
    ConditionalCheckFailed,
    InMemoryTable,
)


def _key(guide_id: GuideId) -> tuple[str, str]:
    key = guide_key(guide_id)
    return key["PK"], key["SK"]


class InMemoryGuideRepository(GuideRepository):
    """InMemoryTable を使用した GuideRepository（ローカル実行・テスト用）"""

    def __init__(self, table: InMemoryTable) -> None:
        self._table = table

    def save(self, guide: Guide) -> None:
        try:
            self._table.put(
                _key(guide.id), to_item(guide), condition=lambda current: current is None
            )
        except ConditionalCheckFailed:
            raise DuplicateResourceException(f"Guide already exists: {guide.id}")

    def find_by_id(self, guide_id: GuideId) -> Guide | None:
        item = self._table.get(_key(guide_id))
        if item is None:
            return None
        return to_entity(item)

    def update_availability(self, guide: Guide) -> None:
        item = to_item(guide)
        attributes = {
            name: item[name]
            for name in ("available_dates", "price_per_day", "currency", "is_hireable")
        }
        attributes["version"] = guide.version + 1
        expected_version = guide.version
        try:
            self._table.update(
                _key(guide.id),
                attributes,
                condition=lambda current: (
                    current is not None and current["version"] == expected_version
                ),
            )
        except ConditionalCheckFailed:
            raise StaleCalendarException(
                f"Guide calendar was modified concurrently: "
                f"guide_id={guide.id}, version={expected_version}"
            )
