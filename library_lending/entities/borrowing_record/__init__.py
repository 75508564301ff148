"""Entity package: BorrowingRecord."""

from .entity import BorrowingRecord
from .repository import BorrowingRecordRepository
from .schemas import BorrowingRecordCreate, BorrowingRecordUpdate
from .table import BorrowingRecordTable

__all__ = [
    "BorrowingRecord",
    "BorrowingRecordCreate",
    "BorrowingRecordRepository",
    "BorrowingRecordTable",
    "BorrowingRecordUpdate",
]
