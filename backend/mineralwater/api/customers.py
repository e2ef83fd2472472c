"""고객 CRUD - ADMIN 전용"""
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity, RequireAdmin
from mineralwater.database import get_db
from mineralwater.errors import Conflict, NotFound, ValidationError
from mineralwater.models import Customer, Route
from mineralwater.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from mineralwater.services.cleanup import delete_customer as delete_customer_cascade

router = APIRouter(prefix="/api/admin/customers", tags=["customers"])


def _ensure_route(db: Session, route_id: int | None) -> None:
    if route_id is not None and db.get(Route, route_id) is None:
        raise ValidationError("routeId must reference an existing route")


def _ensure_email_free(db: Session, email: str | None, exclude_id: int | None = None) -> None:
    if not email:
        return
    stmt = select(Customer.id).where(Customer.email == email)
    if exclude_id is not None:
        stmt = stmt.where(Customer.id != exclude_id)
    if db.execute(stmt).first():
        raise Conflict("Customer email already exists")


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    data: CustomerCreate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    _ensure_route(db, data.route_id)
    _ensure_email_free(db, data.email)
    customer = Customer(**data.model_dump())
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    customer = db.get(Customer, customer_id)
    if not customer:
        raise NotFound("Customer not found")
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """보낸 필드만 수정. 잔액 직접 수정은 관리자만 가능한 경로"""
    customer = db.get(Customer, customer_id)
    if not customer:
        raise NotFound("Customer not found")
    changes = data.model_dump(exclude_unset=True)
    if "route_id" in changes:
        _ensure_route(db, changes["route_id"])
    if changes.get("email"):
        _ensure_email_free(db, changes["email"], exclude_id=customer_id)
    for k, v in changes.items():
        if k in ("name", "balance", "deposit") and v is None:
            continue
        setattr(customer, k, v)
    db.commit()
    db.refresh(customer)
    return customer


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """결제/배송/불만까지 함께 삭제"""
    delete_customer_cascade(db, customer_id)
    return {"ok": True}
