"""Borrowing record repository for data access operations."""

from datetime import date

from pydantic import BaseModel
from sqlmodel import Session, select

from library_lending.entities.borrowing_record.entity import BorrowingRecord
from library_lending.entities.borrowing_record.table import BorrowingRecordTable


class BorrowingRecordRepository:
    """Data-access layer for borrowing records.

    Writes are flushed, never committed. The unique
    ``(customer_id, book_id, borrow_date)`` constraint raises
    ``sqlalchemy.exc.IntegrityError`` at flush time.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, record_id: int) -> BorrowingRecord | None:
        row = self.get_row(record_id)
        if row is None:
            return None
        return BorrowingRecord.model_validate(row)

    def get_row(self, record_id: int) -> BorrowingRecordTable | None:
        return self._session.get(BorrowingRecordTable, record_id)

    def exists(self, record_id: int) -> bool:
        return self.get_row(record_id) is not None

    def list_all(self) -> list[BorrowingRecord]:
        return self._to_entities(select(BorrowingRecordTable).order_by(BorrowingRecordTable.id))

    def find_by_triple(
        self, customer_id: int, book_id: int, borrow_date: date
    ) -> BorrowingRecord | None:
        statement = select(BorrowingRecordTable).where(
            BorrowingRecordTable.customer_id == customer_id,
            BorrowingRecordTable.book_id == book_id,
            BorrowingRecordTable.borrow_date == borrow_date,
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return BorrowingRecord.model_validate(row)

    def list_by_customer(self, customer_id: int) -> list[BorrowingRecord]:
        return [BorrowingRecord.model_validate(row) for row in self.rows_by_customer(customer_id)]

    def list_by_book(self, book_id: int) -> list[BorrowingRecord]:
        return [BorrowingRecord.model_validate(row) for row in self.rows_by_book(book_id)]

    def rows_by_customer(self, customer_id: int) -> list[BorrowingRecordTable]:
        statement = (
            select(BorrowingRecordTable)
            .where(BorrowingRecordTable.customer_id == customer_id)
            .order_by(BorrowingRecordTable.id)
        )
        return list(self._session.exec(statement).all())

    def rows_by_book(self, book_id: int) -> list[BorrowingRecordTable]:
        statement = (
            select(BorrowingRecordTable)
            .where(BorrowingRecordTable.book_id == book_id)
            .order_by(BorrowingRecordTable.id)
        )
        return list(self._session.exec(statement).all())

    def current_loan_row(self, book_id: int) -> BorrowingRecordTable | None:
        """Latest not-yet-returned record for ``book_id``."""
        statement = (
            select(BorrowingRecordTable)
            .where(
                BorrowingRecordTable.book_id == book_id,
                BorrowingRecordTable.returned_on.is_(None),
            )
            .order_by(BorrowingRecordTable.borrow_date.desc(), BorrowingRecordTable.id.desc())
        )
        return self._session.exec(statement).first()

    def create(self, record: BaseModel) -> BorrowingRecord:
        row = BorrowingRecordTable(
            customer_id=record.customer_id,
            book_id=record.book_id,
            borrow_date=record.borrow_date,
            return_date=record.return_date,
        )
        return self.save(row)

    def update(self, record_id: int, changes: BaseModel) -> BorrowingRecord | None:
        row = self.get_row(record_id)
        if row is None:
            return None
        row.customer_id = changes.customer_id
        row.book_id = changes.book_id
        row.borrow_date = changes.borrow_date
        row.return_date = changes.return_date
        return self.save(row)

    def save(self, row: BorrowingRecordTable) -> BorrowingRecord:
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return BorrowingRecord.model_validate(row)

    def delete(self, record_id: int) -> bool:
        row = self.get_row(record_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def delete_rows(self, rows: list[BorrowingRecordTable]) -> int:
        for row in rows:
            self._session.delete(row)
        self._session.flush()
        return len(rows)

    def _to_entities(self, statement) -> list[BorrowingRecord]:
        return [
            BorrowingRecord.model_validate(row) for row in self._session.exec(statement).all()
        ]
