from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 新規保存は条件付き書き込み（既存なら DuplicateResourceException）
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する（強い整合性で読む）"""
        raise NotImplementedError
