"""데모 데이터 - 사용자가 하나도 없을 때만 생성"""
import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from mineralwater.core.security import hash_password
from mineralwater.database import transaction
from mineralwater.models import Bottle, Complaint, Customer, Delivery, Jag, Payment, Route, User
from mineralwater.models.user import Role

log = structlog.get_logger(__name__)

DEMO_USERS = [
    ("Admin Owner", "admin@example.com", "adminpass", Role.ADMIN),
    ("Route Driver", "driver@example.com", "driverpass", Role.DRIVER),
    ("Customer User", "customer@example.com", "customerpass", Role.CUSTOMER),
]


def has_users(db: Session) -> bool:
    return (db.execute(select(func.count(User.id))).scalar_one() or 0) > 0


def seed_demo_data(db: Session) -> None:
    with transaction(db):
        users = {}
        for name, email, password, role in DEMO_USERS:
            user = User(name=name, email=email, password_hash=hash_password(password), role=role)
            db.add(user)
            users[role] = user
        db.flush()

        driver = users[Role.DRIVER]
        route = Route(name="Route A", driver_id=driver.id)
        db.add(route)
        db.flush()

        john = Customer(name="John Doe", email="john@example.com", phone="9999999999", route_id=route.id, balance=100)
        jane = Customer(name="Jane Roe", email="jane@example.com", phone="8888888888", route_id=route.id, balance=0)
        db.add_all([john, jane])

        db.add(Bottle(kind="20L", quantity=50))
        db.add(Jag(kind="small", quantity=100))
        db.flush()

        db.add(Delivery(route_id=route.id, customer_id=john.id, driver_id=driver.id, delivered=False, bottles=1))
        db.add(Payment(customer_id=john.id, amount=100, method="cash"))
        db.add(Complaint(customer_id=jane.id, message="Water delivery delay"))
    log.info("demo_data_seeded", users=len(DEMO_USERS))


def seed_if_empty(db: Session) -> bool:
    if has_users(db):
        return False
    log.info("no_users_found_seeding")
    seed_demo_data(db)
    return True
