"""연관 데이터 정리 후 삭제 - 각 삭제는 하나의 트랜잭션"""
import structlog
from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from mineralwater.database import transaction
from mineralwater.errors import NotFound
from mineralwater.models import Complaint, Customer, Delivery, Payment, Route, User
from mineralwater.models.user import Role

log = structlog.get_logger(__name__)


def delete_route(db: Session, route_id: int) -> None:
    """참조 고객의 route_id를 먼저 비운 뒤 루트 삭제"""
    with transaction(db):
        route = db.get(Route, route_id)
        if route is None:
            raise NotFound("Route not found")
        orphaned = db.execute(
            update(Customer).where(Customer.route_id == route_id).values(route_id=None)
        ).rowcount
        db.execute(update(Delivery).where(Delivery.route_id == route_id).values(route_id=None))
        db.delete(route)
    log.info("route_deleted", route_id=route_id, customers_unassigned=orphaned)


def delete_customer(db: Session, customer_id: int) -> None:
    """결제/배송/불만을 먼저 지우고 고객 삭제"""
    with transaction(db):
        customer = db.get(Customer, customer_id)
        if customer is None:
            raise NotFound("Customer not found")
        payments = db.execute(delete(Payment).where(Payment.customer_id == customer_id)).rowcount
        deliveries = db.execute(delete(Delivery).where(Delivery.customer_id == customer_id)).rowcount
        complaints = db.execute(delete(Complaint).where(Complaint.customer_id == customer_id)).rowcount
        db.delete(customer)
    log.info(
        "customer_deleted",
        customer_id=customer_id,
        payments=payments,
        deliveries=deliveries,
        complaints=complaints,
    )


def get_driver(db: Session, driver_id: int) -> User:
    """기사 역할이 아닌 사용자는 없는 것으로 취급"""
    user = db.get(User, driver_id)
    if user is None or user.role != Role.DRIVER:
        raise NotFound("Driver not found")
    return user


def delete_driver(db: Session, driver_id: int) -> None:
    """배정된 루트의 driver_id를 비운 뒤 기사 삭제"""
    with transaction(db):
        driver = get_driver(db, driver_id)
        unassigned = db.execute(
            update(Route).where(Route.driver_id == driver_id).values(driver_id=None)
        ).rowcount
        db.execute(update(Delivery).where(Delivery.driver_id == driver_id).values(driver_id=None))
        db.delete(driver)
    log.info("driver_deleted", driver_id=driver_id, routes_unassigned=unassigned)
