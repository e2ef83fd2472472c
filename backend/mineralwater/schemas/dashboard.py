"""역할별 대시보드 응답"""
from pydantic import BaseModel

from mineralwater.schemas.auth import UserProfile, UserResponse
from mineralwater.schemas.complaint import ComplaintResponse
from mineralwater.schemas.customer import CustomerResponse
from mineralwater.schemas.delivery import DeliverySummary
from mineralwater.schemas.inventory import InventoryResponse
from mineralwater.schemas.payment import PaymentResponse
from mineralwater.schemas.route import DriverRoute, RouteResponse


class AdminDashboard(BaseModel):
    routes: list[RouteResponse]
    customers: list[CustomerResponse]
    drivers: list[UserResponse]
    bottles: list[InventoryResponse]
    jags: list[InventoryResponse]
    reminders: list[CustomerResponse]


class DriverDashboard(BaseModel):
    route: DriverRoute | None
    deliveries: list[DeliverySummary]
    driver: UserProfile | None


class CustomerDashboard(BaseModel):
    cust: CustomerResponse | None = None
    payments: list[PaymentResponse] = []
    deliveries: list[DeliverySummary] = []
    complaints: list[ComplaintResponse] = []
