"""재고 모델 - 생수병(Bottle), 말통(Jag)"""
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from mineralwater.database import Base


class InventoryMixin:
    """종류(kind)별 수량 - 같은 종류는 한 행으로 누적"""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Bottle(InventoryMixin, Base):
    __tablename__ = "bottles"


class Jag(InventoryMixin, Base):
    __tablename__ = "jags"
