"""결제/미수금 스키마"""
from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

from mineralwater.schemas.common import Money
from mineralwater.schemas.customer import CustomerResponse

_CUSTOMER_ID = AliasChoices("customerId", "customer_id")


class DepositRequest(BaseModel):
    customer_id: int = Field(..., validation_alias=_CUSTOMER_ID)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)


class CollectRequest(BaseModel):
    customer_id: int = Field(..., validation_alias=_CUSTOMER_ID)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)


class PayRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    method: str = Field(default="cash", min_length=1, max_length=32)


class PaymentResponse(BaseModel):
    id: int
    amount: Money
    method: str | None
    customer_id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class PaymentResult(BaseModel):
    customer: CustomerResponse
    payment: PaymentResponse
