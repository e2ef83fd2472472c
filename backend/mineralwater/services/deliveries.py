"""배송 완료 처리"""
import structlog
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity
from mineralwater.database import transaction
from mineralwater.errors import Forbidden, NotFound
from mineralwater.models import Delivery
from mineralwater.services.inventory import consume_bottles

log = structlog.get_logger(__name__)


def set_delivery_status(db: Session, identity: Identity, delivery_id: int, delivered: bool) -> Delivery:
    """기사는 본인 배송만 변경. 미완료→완료 전환 시에만 재고 차감"""
    with transaction(db):
        delivery = db.get(Delivery, delivery_id, with_for_update=True, populate_existing=True)
        if delivery is None:
            raise NotFound("Delivery not found")
        if delivery.driver_id != identity.id:
            raise Forbidden("Delivery is not assigned to you")
        was_delivered = delivery.delivered
        delivery.delivered = delivered
        consumed = None
        if delivered and not was_delivered:
            consumed = consume_bottles(db, delivery.bottles)
    db.refresh(delivery)
    log.info(
        "delivery_status_set",
        delivery_id=delivery.id,
        delivered=delivered,
        bottles_consumed=delivery.bottles if consumed is not None else 0,
    )
    return delivery
