"""역할별 대시보드 집계

각 집계는 여러 조회를 한 응답으로 묶는다. 조회 중 하나라도 실패하면
부분 결과 없이 DashboardLoadFailed.
"""
import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from mineralwater.core.auth import Identity
from mineralwater.errors import DashboardLoadFailed
from mineralwater.models import Bottle, Complaint, Customer, Delivery, Jag, Payment, Route, User
from mineralwater.models.user import Role
from mineralwater.schemas.auth import UserProfile, UserResponse
from mineralwater.schemas.complaint import ComplaintResponse
from mineralwater.schemas.customer import CustomerResponse
from mineralwater.schemas.dashboard import AdminDashboard, CustomerDashboard, DriverDashboard
from mineralwater.schemas.delivery import DeliverySummary
from mineralwater.schemas.inventory import InventoryResponse
from mineralwater.schemas.payment import PaymentResponse
from mineralwater.schemas.route import DriverRoute, RouteResponse

log = structlog.get_logger(__name__)


def find_customer_by_email(db: Session, email: str) -> Customer | None:
    """로그인 계정 → 고객 레코드 연결은 이메일 일치로만"""
    return db.execute(select(Customer).where(Customer.email == email)).scalars().first()


def load_admin_dashboard(db: Session) -> AdminDashboard:
    try:
        routes = db.execute(
            select(Route).options(joinedload(Route.driver)).order_by(Route.id)
        ).scalars().all()
        customers = db.execute(select(Customer).order_by(Customer.id)).scalars().all()
        drivers = db.execute(
            select(User).where(User.role == Role.DRIVER).order_by(User.id)
        ).scalars().all()
        bottles = db.execute(select(Bottle).order_by(Bottle.id)).scalars().all()
        jags = db.execute(select(Jag).order_by(Jag.id)).scalars().all()
        reminders = db.execute(
            select(Customer).where(Customer.balance > 0).order_by(Customer.id)
        ).scalars().all()
        return AdminDashboard(
            routes=[RouteResponse.model_validate(r) for r in routes],
            customers=[CustomerResponse.model_validate(c) for c in customers],
            drivers=[UserResponse.model_validate(d) for d in drivers],
            bottles=[InventoryResponse.model_validate(b) for b in bottles],
            jags=[InventoryResponse.model_validate(j) for j in jags],
            reminders=[CustomerResponse.model_validate(c) for c in reminders],
        )
    except SQLAlchemyError as e:
        log.exception("admin_dashboard_failed")
        raise DashboardLoadFailed("Failed to load admin dashboard") from e


def load_driver_dashboard(db: Session, identity: Identity) -> DriverDashboard:
    """배정 루트(최대 1개) + 본인 배송 목록. 배송은 루트 배정과 무관하게 driver_id로 조회"""
    try:
        driver = db.get(User, identity.id)
        route = db.execute(
            select(Route)
            .options(selectinload(Route.customers))
            .where(Route.driver_id == identity.id)
            .order_by(Route.id)
            .limit(1)
        ).scalars().first()
        deliveries = db.execute(
            select(Delivery)
            .where(Delivery.driver_id == identity.id)
            .order_by(Delivery.date.desc(), Delivery.id.desc())
        ).scalars().all()
        return DriverDashboard(
            route=DriverRoute.model_validate(route) if route else None,
            deliveries=[DeliverySummary.model_validate(d) for d in deliveries],
            driver=UserProfile.model_validate(driver) if driver else None,
        )
    except SQLAlchemyError as e:
        log.exception("driver_dashboard_failed", driver_id=identity.id)
        raise DashboardLoadFailed("Failed to load driver dashboard") from e


def load_customer_dashboard(db: Session, identity: Identity) -> CustomerDashboard:
    """고객 레코드가 없으면 빈 응답 (에러 아님)"""
    try:
        cust = find_customer_by_email(db, identity.email)
        if cust is None:
            return CustomerDashboard()
        payments = db.execute(
            select(Payment)
            .where(Payment.customer_id == cust.id)
            .order_by(Payment.created_at.desc(), Payment.id.desc())
        ).scalars().all()
        deliveries = db.execute(
            select(Delivery)
            .where(Delivery.customer_id == cust.id)
            .order_by(Delivery.date.desc(), Delivery.id.desc())
        ).scalars().all()
        complaints = db.execute(
            select(Complaint)
            .where(Complaint.customer_id == cust.id)
            .order_by(Complaint.created_at.desc(), Complaint.id.desc())
        ).scalars().all()
        return CustomerDashboard(
            cust=CustomerResponse.model_validate(cust),
            payments=[PaymentResponse.model_validate(p) for p in payments],
            deliveries=[DeliverySummary.model_validate(d) for d in deliveries],
            complaints=[ComplaintResponse.model_validate(c) for c in complaints],
        )
    except SQLAlchemyError as e:
        log.exception("customer_dashboard_failed", email=identity.email)
        raise DashboardLoadFailed("Failed to load customer dashboard") from e
