"""通貨換算

基準通貨（TJS）経由で換算する。レートは「1 単位あたりの基準通貨額」なので
    基準通貨額 = amount × rate[from]
    換算結果   = 基準通貨額 ÷ rate[to]
となる。例: {TJS: 1, USD: 10} で 100 TJS → 10.00 USD。
"""

from decimal import ROUND_HALF_UP, Decimal

from services.currency.domain.exception import UnknownCurrencyError
from services.currency.domain.value_object import RateTable
from services.shared.domain import Currency

CENT = Decimal("0.01")
RATE_PRECISION = Decimal("0.000001")


def _rates(
    from_currency: Currency, to_currency: Currency, rate_table: RateTable
) -> tuple[Decimal, Decimal]:
    from_rate = rate_table.rate_of(from_currency)
    to_rate = rate_table.rate_of(to_currency)
    missing = [
        str(c)
        for c, r in ((from_currency, from_rate), (to_currency, to_rate))
        if r is None
    ]
    if missing:
        raise UnknownCurrencyError(missing)
    return from_rate, to_rate


def convert(
    amount: Decimal,
    from_currency: Currency,
    to_currency: Currency,
    rate_table: RateTable,
) -> Decimal:
    """金額を別通貨に換算する（小数第2位で四捨五入）

    同一通貨なら amount をそのまま返す（レート表は参照しない）。
    """
    if from_currency == to_currency:
        return amount
    from_rate, to_rate = _rates(from_currency, to_currency, rate_table)
    in_base = amount * from_rate
    return (in_base / to_rate).quantize(CENT, rounding=ROUND_HALF_UP)


def exchange_rate(
    from_currency: Currency, to_currency: Currency, rate_table: RateTable
) -> Decimal:
    """from → to の実効レート（1 from あたりの to）"""
    if from_currency == to_currency:
        return Decimal("1")
    from_rate, to_rate = _rates(from_currency, to_currency, rate_table)
    return (from_rate / to_rate).quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)
