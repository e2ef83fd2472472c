"""기사 계정 관리 - ADMIN 전용"""
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from mineralwater.core.auth import Identity, RequireAdmin
from mineralwater.core.security import hash_password
from mineralwater.database import get_db
from mineralwater.errors import Conflict
from mineralwater.models import User
from mineralwater.models.user import Role
from mineralwater.schemas.auth import DriverCreate, DriverUpdate, UserResponse
from mineralwater.services.cleanup import delete_driver as delete_driver_cascade
from mineralwater.services.cleanup import get_driver as get_driver_or_404

router = APIRouter(prefix="/api/admin/drivers", tags=["drivers"])


def _ensure_email_free(db: Session, email: str, exclude_id: int | None = None) -> None:
    stmt = select(User.id).where(User.email == email)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    if db.execute(stmt).first():
        raise Conflict("Email already in use")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_driver(
    data: DriverCreate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    _ensure_email_free(db, data.email)
    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        role=Role.DRIVER,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@router.get("/{driver_id}", response_model=UserResponse)
def get_driver(
    driver_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    return get_driver_or_404(db, driver_id)


@router.put("/{driver_id}", response_model=UserResponse)
def update_driver(
    driver_id: int,
    data: DriverUpdate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """이름/이메일 수정, password가 있으면 재설정"""
    user = get_driver_or_404(db, driver_id)
    if data.name is not None:
        user.name = data.name
    if data.email is not None and data.email != user.email:
        _ensure_email_free(db, data.email, exclude_id=driver_id)
        user.email = data.email
    if data.password:
        user.password_hash = hash_password(data.password)
    db.commit()
    db.refresh(user)
    return user


@router.delete("/{driver_id}")
def delete_driver(
    driver_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """배정된 루트는 미배정으로 바꾼 뒤 삭제"""
    delete_driver_cascade(db, driver_id)
    return {"ok": True}
