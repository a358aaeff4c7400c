from __future__ import annotations

import threading
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Callable

Key = tuple[str, str]
Condition = Callable[[dict | None], bool]


class ConditionalCheckFailed(Exception):
    """条件付き書き込みの条件を満たさなかった（DynamoDB の ConditionalCheckFailed 相当）

    index はトランザクション内で失敗した書き込みの位置。
    """

    def __init__(self, index: int, key: Key) -> None:
        super().__init__(f"Condition failed at index {index}: {key}")
        self.index = index
        self.key = key


@dataclass(frozen=True)
class TransactWrite:
    """トランザクション内の1書き込み

    replace=True はアイテム全体の置き換え（Put）、False は属性のマージ（Update）。
    """

    key: Key
    attributes: dict = field(default_factory=dict)
    condition: Condition | None = None
    replace: bool = True


class InMemoryTable:
    """DynamoDB テーブルのインメモリ実装（ローカル実行・テスト用）

    - すべての読み書きはテーブル単位のロックで直列化される
    - transact は全条件を検証してから書き込むため、部分適用は起きない
    - 返却するアイテムはコピーなので、呼び出し側の変更は保存内容に影響しない
    """

    def __init__(self) -> None:
        self._items: dict[Key, dict] = {}
        self._lock = threading.RLock()

    def get(self, key: Key) -> dict | None:
        with self._lock:
            item = self._items.get(key)
            return deepcopy(item) if item is not None else None

    def query(self, predicate: Callable[[dict], bool]) -> list[dict]:
        with self._lock:
            return [deepcopy(item) for item in self._items.values() if predicate(item)]

    def put(self, key: Key, attributes: dict, condition: Condition | None = None) -> None:
        self.transact([TransactWrite(key=key, attributes=attributes, condition=condition)])

    def update(
        self, key: Key, attributes: dict, condition: Condition | None = None
    ) -> None:
        self.transact(
            [
                TransactWrite(
                    key=key, attributes=attributes, condition=condition, replace=False
                )
            ]
        )

    def transact(self, writes: list[TransactWrite]) -> None:
        with self._lock:
            for index, write in enumerate(writes):
                current = self._items.get(write.key)
                if write.condition is not None and not write.condition(current):
                    raise ConditionalCheckFailed(index, write.key)

            for write in writes:
                pk, sk = write.key
                if write.replace or write.key not in self._items:
                    item = {"PK": pk, "SK": sk}
                else:
                    item = self._items[write.key]
                item.update(deepcopy(write.attributes))
                self._items[write.key] = item
