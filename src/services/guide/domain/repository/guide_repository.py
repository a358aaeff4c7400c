from abc import abstractmethod

from services.guide.domain.entity import Guide
from services.guide.domain.value_object import GuideId
from services.shared.domain import Repository


class GuideRepository(Repository[Guide, GuideId]):
    """ガイドレポジトリのインターフェース

    available_dates の更新は version 条件付きの書き込み（update_availability と
    ReservationStore.commit）に限る。
    """

    @abstractmethod
    def save(self, guide: Guide) -> None:
        """ガイドを登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, guide_id: GuideId) -> Guide | None:
        """ガイドIDで検索する（強い整合性読み込み）"""
        raise NotImplementedError

    @abstractmethod
    def update_availability(self, guide: Guide) -> None:
        """空き日・日額・通貨・雇用可否を version 条件付きで更新する

        保存済みの version が guide.version と異なれば StaleCalendarException。
        成功すると version は 1 進む。
        """
        raise NotImplementedError
