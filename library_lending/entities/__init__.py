"""Domain entities, their tables and repositories.

Importing this package registers every table on ``SQLModel.metadata``.
"""

from .author import Author, AuthorCreate, AuthorRepository, AuthorTable, AuthorUpdate, same_author
from .book import Book, BookCreate, BookRepository, BookTable, BookUpdate
from .borrowing_record import (
    BorrowingRecord,
    BorrowingRecordCreate,
    BorrowingRecordRepository,
    BorrowingRecordTable,
    BorrowingRecordUpdate,
)
from .customer import Customer, CustomerCreate, CustomerRepository, CustomerTable, CustomerUpdate

__all__ = [
    "Author",
    "AuthorCreate",
    "AuthorRepository",
    "AuthorTable",
    "AuthorUpdate",
    "Book",
    "BookCreate",
    "BookRepository",
    "BookTable",
    "BookUpdate",
    "BorrowingRecord",
    "BorrowingRecordCreate",
    "BorrowingRecordRepository",
    "BorrowingRecordTable",
    "BorrowingRecordUpdate",
    "Customer",
    "CustomerCreate",
    "CustomerRepository",
    "CustomerTable",
    "CustomerUpdate",
    "same_author",
]
