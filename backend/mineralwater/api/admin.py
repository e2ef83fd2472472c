"""관리자 대시보드, 재고, 보증금"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity, RequireAdmin
from mineralwater.database import get_db
from mineralwater.models import Bottle, Jag
from mineralwater.schemas.dashboard import AdminDashboard
from mineralwater.schemas.inventory import InventoryAdd, InventoryResponse
from mineralwater.schemas.payment import DepositRequest, PaymentResult
from mineralwater.services.dashboards import load_admin_dashboard
from mineralwater.services.inventory import upsert_inventory
from mineralwater.services.ledger import add_deposit

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/dashboard", response_model=AdminDashboard)
def admin_dashboard(
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """루트/고객/기사/재고/미수 고객 전체 조회 (페이지네이션 없음)"""
    return load_admin_dashboard(db)


@router.post("/inventory/bottle", response_model=InventoryResponse)
def add_bottles(
    data: InventoryAdd,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    return upsert_inventory(db, Bottle, data.kind, data.qty)


@router.post("/inventory/jag", response_model=InventoryResponse)
def add_jags(
    data: InventoryAdd,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    return upsert_inventory(db, Jag, data.kind, data.qty)


@router.post("/deposit", response_model=PaymentResult)
def deposit(
    data: DepositRequest,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    customer, payment = add_deposit(db, data.customer_id, data.amount)
    return {"customer": customer, "payment": payment}
