"""Request schemas for borrowing records."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from library_lending.entities._validators import require_past_or_present, require_present_or_future


class BorrowingRecordCreate(BaseModel):
    """Payload for borrowing a book."""

    customer_id: int = Field(description="Borrowing customer")
    book_id: int = Field(description="Book to borrow")
    borrow_date: date = Field(description="Day the loan starts")
    return_date: date = Field(description="Day the loan ends")

    @field_validator("borrow_date")
    @classmethod
    def _borrowed_already(cls, value: date) -> date:
        return require_past_or_present(value, "Borrow date")

    @field_validator("return_date")
    @classmethod
    def _returned_later(cls, value: date) -> date:
        return require_present_or_future(value, "Return date")


class BorrowingRecordUpdate(BorrowingRecordCreate):
    """Full replacement of a borrowing record's fields."""
