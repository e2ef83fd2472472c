"""루트 스키마"""
from pydantic import AliasChoices, BaseModel, Field

from mineralwater.schemas.common import Money, OptionalId

_DRIVER_ID = AliasChoices("driverId", "driver_id")


class RouteCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    driver_id: OptionalId = Field(None, validation_alias=_DRIVER_ID)


class RouteUpdate(BaseModel):
    """name은 선택, driverId는 항상 교체 (없으면 배정 해제)"""

    name: str | None = Field(None, min_length=1, max_length=128)
    driver_id: OptionalId = Field(None, validation_alias=_DRIVER_ID)


class DriverRef(BaseModel):
    id: int
    name: str | None
    email: str

    model_config = {"from_attributes": True}


class RouteResponse(BaseModel):
    id: int
    name: str
    driver_id: int | None
    driver: DriverRef | None = None

    model_config = {"from_attributes": True}


class RouteCustomer(BaseModel):
    """기사 화면용 고객 요약"""

    id: int
    name: str
    phone: str | None
    balance: Money

    model_config = {"from_attributes": True}


class DriverRoute(BaseModel):
    id: int
    name: str
    driver_id: int | None
    customers: list[RouteCustomer] = []

    model_config = {"from_attributes": True}
