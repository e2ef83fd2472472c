"""서비스 단위 - 재고 정책, 잔액 잠금, 비밀번호 해시"""
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from mineralwater.core.security import hash_password, verify_password
from mineralwater.models import Bottle, Customer
from mineralwater.services import inventory
from mineralwater.services.dashboards import find_customer_by_email
from mineralwater.services.inventory import consume_bottles, upsert_inventory
from mineralwater.services.ledger import add_deposit, reduce_balance


def test_consume_bottles_uses_first_row_with_enough_stock(db):
    db.add(Bottle(kind="5L", quantity=100))
    db.commit()
    row = consume_bottles(db, 60)
    db.commit()
    assert row.kind == "5L"
    assert row.quantity == 40
    assert db.get(Bottle, 1).quantity == 50


def test_consume_bottles_noop_without_stock(db):
    assert consume_bottles(db, 51) is None
    db.commit()
    assert db.get(Bottle, 1).quantity == 50


def test_upsert_creates_then_increments(db):
    row = upsert_inventory(db, Bottle, "1L", 3)
    assert row.quantity == 3
    row = upsert_inventory(db, Bottle, "1L", 4)
    assert row.quantity == 7


def test_password_hash_is_salted():
    a, b = hash_password("driverpass"), hash_password("driverpass")
    assert a != b
    assert verify_password("driverpass", a)
    assert not verify_password("wrong", a)


def test_reduce_balance_sees_balance_committed_after_lookup(client, db):
    """이미 읽어 둔 고객이라도 잠근 시점의 잔액으로 계산"""
    cust = find_customer_by_email(db, "john@example.com")
    assert cust.balance == 100

    other = client.app.state.database.session()
    try:
        other.get(Customer, cust.id).balance = Decimal("10")
        other.commit()
    finally:
        other.close()

    customer, payment = reduce_balance(db, cust.id, Decimal("5"), "cash")
    assert customer.balance == Decimal("5")
    assert payment.amount == Decimal("5")


def test_deposit_uses_exact_decimal_arithmetic(db):
    customer, _ = add_deposit(db, 2, Decimal("0.10"))
    customer, _ = add_deposit(db, 2, Decimal("0.20"))
    assert customer.deposit == Decimal("0.30")


def test_inventory_kind_is_unique(db):
    db.add(Bottle(kind="20L", quantity=1))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_upsert_falls_back_to_increment_when_insert_loses_race(db, monkeypatch):
    """다른 요청이 먼저 같은 kind를 넣은 경우 - 조회는 비었지만 insert가 unique 충돌"""
    real_find = inventory.find_kind_for_update
    calls = []

    def find_after_other_insert(session, model, kind):
        calls.append(kind)
        if len(calls) == 1:
            return None
        return real_find(session, model, kind)

    monkeypatch.setattr(inventory, "find_kind_for_update", find_after_other_insert)
    row = upsert_inventory(db, Bottle, "20L", 10)
    assert row.quantity == 60
    assert db.execute(select(func.count(Bottle.id)).where(Bottle.kind == "20L")).scalar_one() == 1
