"""Core services exports."""

from .author_service import AuthorService
from .book_service import BookService
from .cascade import CascadeBus, build_cascade_bus
from .customer_service import CustomerService
from .database.db_session import DbSessionService, transaction
from .lending_service import LendingService

__all__ = [
    "AuthorService",
    "BookService",
    "CascadeBus",
    "CustomerService",
    "DbSessionService",
    "LendingService",
    "build_cascade_bus",
    "transaction",
]
