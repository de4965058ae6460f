from decimal import ROUND_HALF_UP, Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    float の誤差を持ち込まないよう、str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def round_half_up(v: object) -> int:
    """0.5 を切り上げる四捨五入で整数に丸める"""
    return int(to_decimal(v).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def blank_to_none(v: object) -> object:
    """空文字列を None として扱う

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    """
    if isinstance(v, str) and not v.strip():
        return None
    return v
