"""불만 접수 스키마"""
from datetime import datetime

from pydantic import BaseModel, Field


class ComplaintCreate(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)


class ComplaintResponse(BaseModel):
    id: int
    message: str
    status: str
    customer_id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
