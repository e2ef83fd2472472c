"""스키마 공용 타입"""
from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer


def empty_to_none(v: object) -> object:
    """폼에서 넘어오는 빈 문자열은 미지정(None)으로"""
    if isinstance(v, str) and v.strip() == "":
        return None
    return v


OptionalId = Annotated[int | None, BeforeValidator(empty_to_none)]
OptionalStr = Annotated[str | None, BeforeValidator(empty_to_none)]

# 금액은 내부적으로 Decimal, JSON 응답에서는 숫자
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
