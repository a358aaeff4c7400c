from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class HireId:
    """ガイド雇用記録ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("HireId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> HireId:
        return cls(value=str(uuid.uuid4()))
