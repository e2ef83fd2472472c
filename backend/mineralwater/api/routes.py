"""루트 CRUD - ADMIN 전용"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from mineralwater.core.auth import Identity, RequireAdmin
from mineralwater.database import get_db
from mineralwater.errors import NotFound, ValidationError
from mineralwater.models import Route, User
from mineralwater.models.user import Role
from mineralwater.schemas.route import RouteCreate, RouteResponse, RouteUpdate
from mineralwater.services.cleanup import delete_route as delete_route_cascade

router = APIRouter(prefix="/api/admin/routes", tags=["routes"])


def _ensure_driver(db: Session, driver_id: int | None) -> None:
    if driver_id is None:
        return
    user = db.get(User, driver_id)
    if not user or user.role != Role.DRIVER:
        raise ValidationError("driverId must reference a driver")


def _get_route_with_driver(db: Session, route_id: int) -> Route | None:
    return db.get(Route, route_id, options=[joinedload(Route.driver)])


@router.post("", response_model=RouteResponse, status_code=status.HTTP_201_CREATED)
def create_route(
    data: RouteCreate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    _ensure_driver(db, data.driver_id)
    route = Route(name=data.name, driver_id=data.driver_id)
    db.add(route)
    db.commit()
    return _get_route_with_driver(db, route.id)


@router.get("/{route_id}", response_model=RouteResponse)
def get_route(
    route_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    route = _get_route_with_driver(db, route_id)
    if not route:
        raise NotFound("Route not found")
    return route


@router.put("/{route_id}", response_model=RouteResponse)
def update_route(
    route_id: int,
    data: RouteUpdate,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    route = db.get(Route, route_id)
    if not route:
        raise NotFound("Route not found")
    if data.name is not None:
        route.name = data.name
    _ensure_driver(db, data.driver_id)
    route.driver_id = data.driver_id
    db.commit()
    return _get_route_with_driver(db, route_id)


@router.delete("/{route_id}")
def delete_route(
    route_id: int,
    db: Session = Depends(get_db),
    _: Identity = RequireAdmin,
):
    """참조 고객은 미배정으로 바꾼 뒤 삭제"""
    delete_route_cascade(db, route_id)
    return {"ok": True}
