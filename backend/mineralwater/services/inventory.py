"""재고 증감"""
import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mineralwater.database import transaction
from mineralwater.models import Bottle, Jag

log = structlog.get_logger(__name__)


def find_kind_for_update(db: Session, model: type[Bottle] | type[Jag], kind: str) -> Bottle | Jag | None:
    return db.execute(
        select(model).where(model.kind == kind).with_for_update()
    ).scalars().first()


def upsert_inventory(db: Session, model: type[Bottle] | type[Jag], kind: str, qty: int) -> Bottle | Jag:
    """같은 kind가 있으면 수량 누적, 없으면 새 행. 이 경로로는 감소하지 않음

    kind는 unique - 동시에 첫 행을 넣으려다 밀린 쪽은 기존 행에 누적한다.
    """
    with transaction(db):
        row = find_kind_for_update(db, model, kind)
        if row is None:
            try:
                with db.begin_nested():
                    row = model(kind=kind, quantity=qty)
                    db.add(row)
            except IntegrityError:
                log.info("inventory_insert_conflict", table=model.__tablename__, kind=kind)
                row = find_kind_for_update(db, model, kind)
                row.quantity += qty
        else:
            row.quantity += qty
    db.refresh(row)
    log.info("inventory_added", table=model.__tablename__, kind=kind, qty=qty, quantity=row.quantity)
    return row


def consume_bottles(db: Session, count: int) -> Bottle | None:
    """배송 완료 시 생수병 재고 차감 (commit은 호출자 트랜잭션에서)

    수량이 충분한 첫 행만 차감. 없으면 아무것도 하지 않는다.
    """
    row = db.execute(
        select(Bottle).where(Bottle.quantity >= count).order_by(Bottle.id).limit(1).with_for_update()
    ).scalars().first()
    if row is None:
        log.warning("bottle_stock_insufficient", requested=count)
        return None
    row.quantity -= count
    return row
