"""Entity package: Customer."""

from .entity import Customer
from .repository import CustomerRepository
from .schemas import CustomerCreate, CustomerUpdate
from .table import CustomerTable

__all__ = [
    "Customer",
    "CustomerCreate",
    "CustomerRepository",
    "CustomerTable",
    "CustomerUpdate",
]
