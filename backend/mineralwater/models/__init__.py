"""DB 모델"""
from mineralwater.models.user import Role, User
from mineralwater.models.route import Route
from mineralwater.models.customer import Customer
from mineralwater.models.inventory import Bottle, Jag
from mineralwater.models.delivery import Delivery
from mineralwater.models.payment import Payment
from mineralwater.models.complaint import Complaint

__all__ = [
    "Role",
    "User",
    "Route",
    "Customer",
    "Bottle",
    "Jag",
    "Delivery",
    "Payment",
    "Complaint",
]
