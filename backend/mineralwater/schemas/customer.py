"""고객 스키마"""
from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

from mineralwater.schemas.common import Money, OptionalId, OptionalStr

_ROUTE_ID = AliasChoices("routeId", "route_id")


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: OptionalStr = Field(None, max_length=255)
    phone: OptionalStr = Field(None, max_length=32)
    route_id: OptionalId = Field(None, validation_alias=_ROUTE_ID)
    balance: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    deposit: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)


class CustomerUpdate(BaseModel):
    """보낸 필드만 반영 (model_dump(exclude_unset=True))"""

    name: str | None = Field(None, min_length=1, max_length=128)
    email: OptionalStr = Field(None, max_length=255)
    phone: OptionalStr = Field(None, max_length=32)
    route_id: OptionalId = Field(None, validation_alias=_ROUTE_ID)
    balance: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    deposit: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: str | None
    phone: str | None
    balance: Money
    deposit: Money
    route_id: int | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
