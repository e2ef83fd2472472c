"""루트 모델"""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mineralwater.database import Base

if TYPE_CHECKING:
    from mineralwater.models.customer import Customer
    from mineralwater.models.user import User


class Route(Base):
    """배송 루트 - 기사 1명 배정 (없으면 미배정)"""

    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    driver_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    driver: Mapped["User"] = relationship("User", back_populates="routes")
    customers: Mapped[list["Customer"]] = relationship(
        "Customer", back_populates="route", order_by="Customer.id"
    )
