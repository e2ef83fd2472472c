"""기사 API - 대시보드, 배송 완료, 위치, 수금"""
import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity, RequireDriver
from mineralwater.database import get_db
from mineralwater.errors import NotFound
from mineralwater.models import User
from mineralwater.schemas.auth import GpsUpdate, UserProfile
from mineralwater.schemas.dashboard import DriverDashboard
from mineralwater.schemas.delivery import DeliveryResponse, DeliveryStatusUpdate
from mineralwater.schemas.payment import CollectRequest, PaymentResult
from mineralwater.services.dashboards import load_driver_dashboard
from mineralwater.services.deliveries import set_delivery_status
from mineralwater.services.ledger import collect_payment

router = APIRouter(prefix="/api/driver", tags=["driver"])
log = structlog.get_logger(__name__)


@router.get("/dashboard", response_model=DriverDashboard)
def driver_dashboard(
    db: Session = Depends(get_db),
    identity: Identity = RequireDriver,
):
    return load_driver_dashboard(db, identity)


@router.post("/delivery", response_model=DeliveryResponse)
def update_delivery(
    data: DeliveryStatusUpdate,
    db: Session = Depends(get_db),
    identity: Identity = RequireDriver,
):
    return set_delivery_status(db, identity, data.delivery_id, data.delivered)


@router.post("/gps", response_model=UserProfile)
def update_location(
    data: GpsUpdate,
    db: Session = Depends(get_db),
    identity: Identity = RequireDriver,
):
    user = db.get(User, identity.id)
    if not user:
        raise NotFound("User not found")
    user.last_lat = data.lat
    user.last_lng = data.lng
    db.commit()
    db.refresh(user)
    log.debug("driver_location_updated", driver_id=user.id)
    return user


@router.post("/collect", response_model=PaymentResult)
def collect(
    data: CollectRequest,
    db: Session = Depends(get_db),
    _: Identity = RequireDriver,
):
    """현장 수금 - 미수금은 0 아래로 내려가지 않음"""
    customer, payment = collect_payment(db, data.customer_id, data.amount)
    return {"customer": customer, "payment": payment}
