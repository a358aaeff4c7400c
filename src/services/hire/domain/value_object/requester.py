from dataclasses import dataclass


@dataclass(frozen=True)
class Requester:
    """依頼者（観光客）の氏名と連絡先"""

    name: str
    email: str | None = None
    phone: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Requester name cannot be empty")
        if len(self.name) > 100:
            raise ValueError("Requester name is too long (max 100 characters)")
        if not self.email and not self.phone:
            raise ValueError("Requester must have an email or a phone number")

    @property
    def identity(self) -> str:
        """履歴検索に使う依頼者ID（メール優先、なければ電話番号）"""
        if self.email:
            return self.email.strip().lower()
        return self.phone.strip()
