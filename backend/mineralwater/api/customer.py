"""고객 API - 대시보드, 결제, 불만 접수"""
import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity, RequireCustomer
from mineralwater.database import get_db
from mineralwater.errors import NotFound
from mineralwater.models import Complaint, Customer
from mineralwater.schemas.complaint import ComplaintCreate, ComplaintResponse
from mineralwater.schemas.dashboard import CustomerDashboard
from mineralwater.schemas.payment import PayRequest, PaymentResult
from mineralwater.services.dashboards import find_customer_by_email, load_customer_dashboard
from mineralwater.services.ledger import reduce_balance

router = APIRouter(prefix="/api/customer", tags=["customer"])
log = structlog.get_logger(__name__)


def _own_customer(db: Session, identity: Identity) -> Customer:
    cust = find_customer_by_email(db, identity.email)
    if not cust:
        raise NotFound("Customer record not found")
    return cust


@router.get("/dashboard", response_model=CustomerDashboard)
def customer_dashboard(
    db: Session = Depends(get_db),
    identity: Identity = RequireCustomer,
):
    """고객 레코드가 없으면 빈 대시보드 (200)"""
    return load_customer_dashboard(db, identity)


@router.post("/pay", response_model=PaymentResult)
def pay(
    data: PayRequest,
    db: Session = Depends(get_db),
    identity: Identity = RequireCustomer,
):
    cust = _own_customer(db, identity)
    customer, payment = reduce_balance(db, cust.id, data.amount, data.method)
    return {"customer": customer, "payment": payment}


@router.post("/complaint", response_model=ComplaintResponse)
def file_complaint(
    data: ComplaintCreate,
    db: Session = Depends(get_db),
    identity: Identity = RequireCustomer,
):
    cust = _own_customer(db, identity)
    complaint = Complaint(customer_id=cust.id, message=data.message)
    db.add(complaint)
    db.commit()
    db.refresh(complaint)
    log.info("complaint_filed", customer_id=cust.id, complaint_id=complaint.id)
    return complaint
