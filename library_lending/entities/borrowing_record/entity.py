"""Entity: BorrowingRecord."""

from datetime import date

from pydantic import Field

from library_lending.entities._base import Entity
from library_lending.entities.book.entity import Book
from library_lending.entities.customer.entity import Customer


class BorrowingRecord(Entity):
    """A loan of one book to one customer between two dates."""

    customer_id: int = Field(description="Borrowing customer")
    book_id: int = Field(description="Borrowed book")
    borrow_date: date = Field(description="Day the loan started")
    return_date: date = Field(description="Day the loan ends")
    returned_on: date | None = Field(default=None, description="Day the book came back, if it has")
    customer: Customer | None = Field(default=None, description="Resolved customer")
    book: Book | None = Field(default=None, description="Resolved book")

    def is_open(self, today: date | None = None) -> bool:
        """True while the return date has not passed."""
        return self.return_date > (today or date.today())
