from services.shared.domain.exception import DomainException


class UnknownCurrencyError(DomainException):
    """為替レート表に存在しない通貨コードが指定された"""

    def __init__(self, codes: list[str]) -> None:
        self.codes = sorted(set(codes))
        super().__init__(f"Unknown currency: {', '.join(self.codes)}")
