"""재고 스키마"""
from pydantic import BaseModel, Field


class InventoryAdd(BaseModel):
    kind: str = Field(..., min_length=1, max_length=64)
    # 이 경로로는 감소 불가
    qty: int = Field(..., ge=0)


class InventoryResponse(BaseModel):
    id: int
    kind: str
    quantity: int

    model_config = {"from_attributes": True}
