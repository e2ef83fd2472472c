"""미수금/보증금 변경 - 항상 결제 기록을 함께 남김

잔액 read-modify-write는 행 잠금(SELECT ... FOR UPDATE) 안에서 수행.
"""
from decimal import Decimal

import structlog
from sqlalchemy.orm import Session

from mineralwater.database import transaction
from mineralwater.errors import NotFound
from mineralwater.models import Customer, Payment

log = structlog.get_logger(__name__)

METHOD_CASH = "cash"
METHOD_DEPOSIT = "deposit"
ZERO = Decimal("0")


def _lock_customer(db: Session, customer_id: int, not_found: str = "Customer not found") -> Customer:
    # 세션에 이미 올라온 객체도 잠근 시점의 값으로 다시 채움
    customer = db.get(Customer, customer_id, with_for_update=True, populate_existing=True)
    if customer is None:
        raise NotFound(not_found)
    return customer


def reduce_balance(db: Session, customer_id: int, amount: Decimal, method: str) -> tuple[Customer, Payment]:
    """balance = max(0, balance - amount). 결제 기록은 요청 금액 그대로"""
    amount = Decimal(amount)
    with transaction(db):
        customer = _lock_customer(db, customer_id)
        before = customer.balance or ZERO
        customer.balance = max(ZERO, before - amount)
        payment = Payment(customer_id=customer.id, amount=amount, method=method)
        db.add(payment)
    db.refresh(customer)
    db.refresh(payment)
    log.info(
        "balance_reduced",
        customer_id=customer.id,
        amount=str(amount),
        method=method,
        balance_before=str(before),
        balance_after=str(customer.balance),
    )
    return customer, payment


def collect_payment(db: Session, customer_id: int, amount: Decimal) -> tuple[Customer, Payment]:
    """기사 현장 수금 (현금)"""
    return reduce_balance(db, customer_id, amount, METHOD_CASH)


def add_deposit(db: Session, customer_id: int, amount: Decimal) -> tuple[Customer, Payment]:
    """관리자 보증금 입금 - deposit += amount"""
    amount = Decimal(amount)
    with transaction(db):
        customer = _lock_customer(db, customer_id)
        customer.deposit = (customer.deposit or ZERO) + amount
        payment = Payment(customer_id=customer.id, amount=amount, method=METHOD_DEPOSIT)
        db.add(payment)
    db.refresh(customer)
    db.refresh(payment)
    log.info("deposit_added", customer_id=customer.id, amount=str(amount), deposit=str(customer.deposit))
    return customer, payment
