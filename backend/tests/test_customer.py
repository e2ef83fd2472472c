"""고객 - 대시보드(이메일 연결), 결제, 불만 접수"""
import pytest


@pytest.fixture
def linked(client, admin_headers):
    """데모 고객 John Doe를 customer@example.com 로그인 계정에 연결"""
    r = client.put("/api/admin/customers/1", json={"email": "customer@example.com"}, headers=admin_headers)
    assert r.status_code == 200
    return r.json()


def test_dashboard_without_matching_customer_is_empty(client, customer_headers):
    r = client.get("/api/customer/dashboard", headers=customer_headers)
    assert r.status_code == 200
    assert r.json() == {"cust": None, "payments": [], "deliveries": [], "complaints": []}


def test_dashboard_for_linked_customer(client, customer_headers, linked):
    r = client.get("/api/customer/dashboard", headers=customer_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["cust"]["balance"] == 100
    assert body["cust"]["name"] == "John Doe"
    # 데모 데이터의 결제 1건만
    assert [(p["amount"], p["method"]) for p in body["payments"]] == [(100, "cash")]
    assert len(body["deliveries"]) == 1
    assert body["complaints"] == []


def test_pay_clamps_balance_and_records_requested_amount(client, admin_headers, customer_headers, linked):
    client.put("/api/admin/customers/1", json={"balance": 50}, headers=admin_headers)
    r = client.post("/api/customer/pay", json={"amount": 70, "method": "upi"}, headers=customer_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["customer"]["balance"] == 0
    assert body["payment"]["amount"] == 70
    assert body["payment"]["method"] == "upi"

    payments = client.get("/api/customer/dashboard", headers=customer_headers).json()["payments"]
    assert len(payments) == 2
    assert payments[0]["id"] == body["payment"]["id"]


def test_pay_without_customer_record(client, customer_headers):
    r = client.post("/api/customer/pay", json={"amount": 10, "method": "cash"}, headers=customer_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Customer record not found"}


def test_file_complaint(client, customer_headers, linked):
    r = client.post("/api/customer/complaint", json={"message": "Bottle was leaking"}, headers=customer_headers)
    assert r.status_code == 200
    complaint = r.json()
    assert complaint["status"] == "open"
    assert complaint["customer_id"] == 1

    complaints = client.get("/api/customer/dashboard", headers=customer_headers).json()["complaints"]
    assert [c["message"] for c in complaints] == ["Bottle was leaking"]


def test_complaint_requires_message(client, customer_headers, linked):
    r = client.post("/api/customer/complaint", json={"message": ""}, headers=customer_headers)
    assert r.status_code == 400
