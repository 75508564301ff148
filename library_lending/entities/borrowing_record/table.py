"""Borrowing record database table model."""

from datetime import date
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship

from library_lending.entities._base import EntityTable
from library_lending.entities.book.table import BookTable
from library_lending.entities.customer.table import CustomerTable


class BorrowingRecordTable(EntityTable, table=True):
    """Database persistence model for a loan of one book to one customer."""

    __tablename__ = "borrowing_records"
    __table_args__ = (
        UniqueConstraint(
            "customer_id", "book_id", "borrow_date", name="uq_borrowing_customer_book_date"
        ),
    )

    customer_id: int = Field(foreign_key="customers.id", index=True)
    book_id: int = Field(foreign_key="books.id", index=True)
    borrow_date: date
    return_date: date
    returned_on: Optional[date] = Field(default=None)

    customer: Optional[CustomerTable] = Relationship()
    book: Optional[BookTable] = Relationship()
