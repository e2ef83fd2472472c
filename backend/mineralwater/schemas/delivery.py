"""배송 스키마"""
from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator


class DeliveryStatusUpdate(BaseModel):
    delivery_id: int = Field(..., validation_alias=AliasChoices("deliveryId", "delivery_id"))
    delivered: bool


class DeliveryResponse(BaseModel):
    id: int
    date: datetime
    delivered: bool
    bottles: int
    route_id: int | None
    customer_id: int | None
    driver_id: int | None

    model_config = {"from_attributes": True}


class DeliverySummary(BaseModel):
    """대시보드용 - 날짜는 시간 없이"""

    id: int
    date: date
    delivered: bool
    bottles: int
    customer_id: int | None

    @field_validator("date", mode="before")
    @classmethod
    def date_only(cls, v: object) -> object:
        if isinstance(v, datetime):
            return v.date()
        return v

    model_config = {"from_attributes": True}
