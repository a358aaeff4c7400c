from dataclasses import dataclass


@dataclass(frozen=True)
class GuideId:
    """ガイドID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("GuideId cannot be empty")

    def __str__(self) -> str:
        return self.value
