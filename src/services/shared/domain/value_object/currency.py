from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    対応通貨は為替レート表で決まるため、ここでは形式のみ検証する。
    """

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isalpha():
            raise ValueError(f"Invalid currency code: {self.code}")
        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code
