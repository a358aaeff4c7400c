from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") や DynamoDB の数値型から
    呼び出すことを想定。float は str 経由で変換し、二進誤差を持ち込まない。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))
